# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest

from rsacrypt.bitstream import BitCursor


def test_read_lsb_first():
    cur = BitCursor(b"\xb5")  # 1011 0101
    assert cur.read(1) == 1
    assert cur.read(2) == 0b10
    assert cur.read(5) == 0b10110
    assert (cur.pos, cur.offset) == (1, 0)


def test_read_across_bytes():
    cur = BitCursor(b"\xff\x01")
    assert cur.read(4) == 0xf
    assert cur.read(8) == 0b0001_1111
    assert cur.tell() == 12
    assert cur.read(4) == 0


def test_read_zero_bits():
    cur = BitCursor(b"")
    assert cur.read(0) == 0
    assert cur.tell() == 0


def test_write_packs_bits():
    cur = BitCursor.blank(2)
    cur.write(3, 0b101)
    cur.write(7, 0x7f)
    assert cur.buffer == bytearray(b"\xfd\x03")
    assert (cur.pos, cur.offset) == (1, 2)
    assert cur.tell() == 10
    assert cur.bytes_used == 2


def test_write_ignores_excess_bits():
    cur = BitCursor.blank(1)
    cur.write(3, 0xff)
    assert cur.buffer == bytearray(b"\x07")


def test_write_ors_into_place():
    cur = BitCursor(bytearray(b"\x80"))
    cur.write(3, 0)
    assert cur.buffer == bytearray(b"\x80")
    cur.write(2, 0b11)
    assert cur.buffer == bytearray(b"\x98")


def test_blank_is_zeroed():
    cur = BitCursor.blank(16)
    assert cur.buffer == bytearray(16)
    assert cur.bytes_used == 0


def test_mixed_widths_read_back():
    widths = [1, 5, 7, 8, 9, 13, 31, 32, 2, 3]
    values = [(1 << w) - 1 - (w * 37 % (1 << w)) for w in widths]
    writer = BitCursor.blank((sum(widths) + 7) // 8)
    for w, v in zip(widths, values):
        writer.write(w, v)
    assert writer.bytes_used == len(writer.buffer)
    reader = BitCursor(bytes(writer.buffer))
    assert [reader.read(w) for w in widths] == values


def test_read_past_end():
    cur = BitCursor(b"\x00")
    cur.read(3)
    with pytest.raises(IndexError):
        cur.read(6)
    assert cur.tell() == 3


def test_write_past_end():
    cur = BitCursor.blank(1)
    with pytest.raises(IndexError):
        cur.write(9, 1)
    assert cur.buffer == bytearray(1)


def test_negative_count():
    with pytest.raises(ValueError):
        BitCursor(b"\x00").read(-1)
