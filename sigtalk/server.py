"""Signal-driven receiver: rebuilds bytes from SIGUSR1/SIGUSR2 and echoes each signal back."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO

from sigtalk.formatting import printf
from sigtalk.protocol import BIT_FOR_SIGNAL, TERMINATOR, ByteAssembler


class Server:
    """Decodes bits arriving as signals and writes each finished byte to ``output``.

    The sender of a byte's first bit is remembered until the byte is complete,
    and every signal is acknowledged back to that process.
    """

    def __init__(self, output: BinaryIO | None = None) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self.client_pid: int | None = None
        self._assembler = ByteAssembler()

    def _acknowledge(self, signo: int) -> None:
        if self.client_pid is None:
            return
        try:
            os.kill(self.client_pid, signo)
        except OSError:
            pass

    def handle(self, signo: int, sender_pid: int) -> int | None:
        """Process one incoming signal; return the byte it completes, if any."""
        if signo not in BIT_FOR_SIGNAL:
            raise ValueError(f"unexpected signal {signo}")
        if not self.client_pid:
            self.client_pid = sender_pid
            self._assembler = ByteAssembler()
        self._acknowledge(signo)
        value = self._assembler.feed(BIT_FOR_SIGNAL[signo])
        if value is None:
            return None
        self.client_pid = None
        self.output.write(bytes([value]))
        if value == TERMINATOR:
            self.output.write(b"\n")
        self.output.flush()
        return value

    def serve_forever(self) -> None:
        """Wait for signals and handle them until the process is stopped."""
        signals = set(BIT_FOR_SIGNAL)
        signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        while True:
            info = signal.sigwaitinfo(signals)
            self.handle(info.si_signo, info.si_pid)


def main(argv: list[str] | None = None) -> int:
    """Print this process id, then receive messages forever."""
    printf("%d\n", os.getpid())
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())