from unittest import mock

import pytest

from sigtalk.client import SendError, main, send_byte, send_message
from sigtalk.protocol import SIGNAL_FOR_BIT, ZERO_SIGNAL, encode_byte, encode_message


def test_send_byte_signals_each_bit():
    with mock.patch("os.kill") as kill, mock.patch("time.sleep") as sleep:
        send_byte(1234, ord("A"), 0)
    expected = [mock.call(1234, SIGNAL_FOR_BIT[b]) for b in encode_byte(ord("A"))]
    assert kill.call_args_list == expected
    assert sleep.call_count == 8


def test_send_byte_failure_raises():
    with mock.patch("os.kill", side_effect=ProcessLookupError), mock.patch("time.sleep"):
        with pytest.raises(SendError):
            send_byte(1234, 7, 0)


def test_send_message_includes_terminator():
    with mock.patch("os.kill") as kill, mock.patch("time.sleep"):
        count = send_message(99, "hi", 0)
    assert count == len("hi") + 1
    sent = [c.args[1] for c in kill.call_args_list]
    assert sent == [SIGNAL_FOR_BIT[b] for b in encode_message("hi")]
    assert sent[-8:] == [ZERO_SIGNAL] * 8


def test_main_usage_on_wrong_arguments(capsys):
    assert main(["1234"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_sends_message(capsys):
    with mock.patch("os.kill") as kill, mock.patch("time.sleep"), mock.patch("signal.signal"):
        status = main(["1234", "ab"])
    assert status == 0
    assert len(kill.call_args_list) == 24
    assert {c.args[0] for c in kill.call_args_list} == {1234}
    assert capsys.readouterr().out == "\n\n"


def test_main_reports_send_failure(capsys):
    with mock.patch("os.kill", side_effect=PermissionError), mock.patch("time.sleep"), \
            mock.patch("signal.signal"):
        status = main(["1234", "x"])
    assert status == 2
    assert "Error while signal to server PID" in capsys.readouterr().err