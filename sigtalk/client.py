"""Signal-driven sender: transmits a message bit by bit to a receiving process."""

from __future__ import annotations

import os
import signal
import sys
import time

from sigtalk.chars import atoi
from sigtalk.formatting import printf
from sigtalk.protocol import ONE_SIGNAL, SIGNAL_FOR_BIT, TERMINATOR, ZERO_SIGNAL, encode_byte

DEFAULT_DELAY = 0.0006
USAGE = "Usage: ./client [Server PID] [String to sent]"
SEND_FAILED = "Error while signal to server PID"

_ACK_MESSAGES = {
    ZERO_SIGNAL: "SIGUSR1 recieved by server",
    ONE_SIGNAL: "SIGUSR2 recieved by server",
}


class SendError(OSError):
    """Raised when a signal cannot be delivered to the receiving process."""


def send_byte(server_pid: int, value: int, delay: float = DEFAULT_DELAY) -> None:
    """Send the eight bits of ``value``, pausing ``delay`` seconds after each."""
    for bit in encode_byte(value):
        try:
            os.kill(server_pid, SIGNAL_FOR_BIT[bit])
        except OSError as exc:
            raise SendError(f"cannot signal process {server_pid}: {exc}") from exc
        time.sleep(delay)


def send_message(server_pid: int, message: str | bytes, delay: float = DEFAULT_DELAY) -> int:
    """Send ``message`` and its closing NUL byte; return the number of bytes sent."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for value in data:
        send_byte(server_pid, value, delay)
    send_byte(server_pid, TERMINATOR, delay)
    return len(data) + 1


def _report_ack(signo: int, frame: object) -> None:
    sys.stdout.write(_ACK_MESSAGES[signo] + "\n")
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Send the message given on the command line to the given process id."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 1
    server_pid = atoi(args[0])
    data = os.fsencode(args[1])
    for signo in _ACK_MESSAGES:
        signal.signal(signo, _report_ack)
    try:
        for value in data:
            send_byte(server_pid, value)
            printf("\n")
        send_byte(server_pid, TERMINATOR)
    except SendError:
        print(SEND_FAILED, file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())