"""Bit-level wire format: each byte travels as eight signals, most significant bit first.

A zero bit is carried by SIGUSR1 and a one bit by SIGUSR2. A message ends
with a NUL byte.
"""

from __future__ import annotations

import signal
from collections.abc import Iterator
from dataclasses import dataclass

ZERO_SIGNAL = int(getattr(signal, "SIGUSR1", 10))
ONE_SIGNAL = int(getattr(signal, "SIGUSR2", 12))
SIGNAL_FOR_BIT = (ZERO_SIGNAL, ONE_SIGNAL)
BIT_FOR_SIGNAL = {ZERO_SIGNAL: 0, ONE_SIGNAL: 1}
BITS_PER_BYTE = 8
TERMINATOR = 0


def encode_byte(value: int) -> tuple[int, ...]:
    """Return the eight bits of ``value``, most significant first."""
    value = int(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def encode_message(message: str | bytes) -> Iterator[int]:
    """Yield the bits of ``message`` followed by those of the closing NUL byte.

    Text is encoded as UTF-8.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for value in data:
        yield from encode_byte(value)
    yield from encode_byte(TERMINATOR)


@dataclass
class ByteAssembler:
    """Collects bits, most significant first, into whole bytes."""

    bit_index: int = 0
    bits: int = 0

    def feed(self, bit: int) -> int | None:
        """Add one bit; return the finished byte after the eighth, else None."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        if bit:
            self.bits += 1 << (BITS_PER_BYTE - 1 - self.bit_index)
        self.bit_index += 1
        if self.bit_index < BITS_PER_BYTE:
            return None
        value = self.bits
        self.bit_index = 0
        self.bits = 0
        return value