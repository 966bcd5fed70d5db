import pytest

from sigtalk.protocol import (
    BIT_FOR_SIGNAL,
    ONE_SIGNAL,
    SIGNAL_FOR_BIT,
    ZERO_SIGNAL,
    ByteAssembler,
    encode_byte,
    encode_message,
)


def test_encode_byte_most_significant_first():
    assert encode_byte(0x41) == (0, 1, 0, 0, 0, 0, 0, 1)


def test_encode_byte_extremes():
    assert encode_byte(0) == (0,) * 8
    assert encode_byte(255) == (1,) * 8


@pytest.mark.parametrize("value", [-1, 256, 1000])
def test_encode_byte_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        encode_byte(value)


def test_encode_message_ends_with_terminator():
    bits = list(encode_message("hi"))
    assert len(bits) == 24
    assert bits[:8] == list(encode_byte(ord("h")))
    assert bits[8:16] == list(encode_byte(ord("i")))
    assert bits[16:] == [0] * 8


def test_encode_message_empty_is_only_terminator():
    assert list(encode_message(b"")) == [0] * 8


def test_encode_message_text_uses_utf8():
    assert list(encode_message("é")) == list(encode_message("é".encode("utf-8")))


def test_round_trip_every_byte():
    assembler = ByteAssembler()
    for value in range(256):
        results = [assembler.feed(bit) for bit in encode_byte(value)]
        assert results[:-1] == [None] * 7
        assert results[-1] == value


def test_assembler_resets_after_byte():
    assembler = ByteAssembler()
    for bit in encode_byte(200):
        assembler.feed(bit)
    assert (assembler.bit_index, assembler.bits) == (0, 0)


def test_assembler_decodes_message():
    assembler = ByteAssembler()
    decoded = [b for b in map(assembler.feed, encode_message(b"ok")) if b is not None]
    assert bytes(decoded) == b"ok\0"


def test_assembler_rejects_non_bit():
    with pytest.raises(ValueError):
        ByteAssembler().feed(2)


def test_signal_mapping_round_trips_through_assembler():
    assert SIGNAL_FOR_BIT == (ZERO_SIGNAL, ONE_SIGNAL)
    signals = [SIGNAL_FOR_BIT[bit] for bit in encode_byte(0xA5)]
    assert signals[0] == ONE_SIGNAL
    assert signals[1] == ZERO_SIGNAL
    assembler = ByteAssembler()
    results = [assembler.feed(BIT_FOR_SIGNAL[signo]) for signo in signals]
    assert results[-1] == 0xA5
    assert results[:-1] == [None] * 7