"""Tests for the host-callback bridge."""

from __future__ import annotations

import logging

import pytest

from chessply.bridge.host import HostCallError, HostFunction, to_host_value
from chessply.core.enums import Mark
from chessply.core.ply import Ply
from chessply.core.types import Position

E4 = Position.parse("e4")
F6 = Position.parse("f6")


class TestToHostValue:
    def test_primitives_pass_through(self) -> None:
        for value in (None, True, 3, 1.5, "x"):
            assert to_host_value(value) == value

    def test_enum_becomes_name(self) -> None:
        assert to_host_value(Mark.BLACK) == "BLACK"

    def test_position_becomes_name(self) -> None:
        assert to_host_value(E4) == "e4"

    def test_ply_list(self) -> None:
        plies = [Ply.new_move(E4, F6), Ply.new_capture(F6, E4)]
        assert to_host_value(plies) == [
            {"from": "e4", "to": "f6", "capture": False},
            {"from": "f6", "to": "e4", "capture": True},
        ]

    def test_dict_keys_become_strings(self) -> None:
        assert to_host_value({1: (E4,)}) == {"1": ["e4"]}

    def test_unsupported_value_raises(self) -> None:
        with pytest.raises(HostCallError, match="Cannot serialize object"):
            to_host_value(object())


class TestHostFunction:
    def test_call_returns_host_response(self) -> None:
        received: list[object] = []

        def host(value: object) -> str:
            received.append(value)
            return "ok"

        fn: HostFunction[list[Ply]] = HostFunction(host)
        assert fn.call([Ply.new_move(E4, F6)]) == "ok"
        assert received == [[{"from": "e4", "to": "f6", "capture": False}]]

    def test_host_error_is_carried(self, caplog: pytest.LogCaptureFixture) -> None:
        failure = RuntimeError("host rejected value")

        def host(_value: object) -> None:
            raise failure

        fn: HostFunction[Ply] = HostFunction(host)
        with caplog.at_level(logging.WARNING, logger="chessply.bridge.host"):
            with pytest.raises(HostCallError) as info:
                fn.call(Ply.new_move(E4, F6))
        assert info.value.error is failure
        assert "host rejected value" in caplog.text

    def test_serialization_failure_skips_host(self) -> None:
        called: list[object] = []
        fn: HostFunction[object] = HostFunction(called.append)
        with pytest.raises(HostCallError):
            fn.call(object())
        assert called == []
