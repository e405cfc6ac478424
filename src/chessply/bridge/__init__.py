"""Bridge package: host-callback adapter and Qt worker publishing plies."""

from chessply.bridge.host import HostCallError, HostFunction, to_host_value
from chessply.bridge.qt_bridge import PlyWorker

__all__ = [
    "HostCallError",
    "HostFunction",
    "PlyWorker",
    "to_host_value",
]
