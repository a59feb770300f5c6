#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
General utilities to be used internally.

"""
from struct import unpack_from


def read_cstring(buffer, offset, length, *, encoding='utf-8'):
    """Read a fixed-length, null-terminated text field.

    Raises
    ------
    UnicodeDecodeError
        If the bytes before the terminator aren't valid `encoding`.
    """
    raw = bytes(buffer[offset:offset + length])
    return raw.split(b'\x00', 1)[0].decode(encoding)


def read_field(buffer, offset, fmt):
    """Unpack a single value at `offset`."""
    value, = unpack_from(fmt, buffer, offset)
    return value


def slot_offsets(total_len, start, size):
    """Offsets of every whole `size`-byte slot from `start` onwards.

    Trailing bytes that don't fill a slot are left out.
    """
    n_slots = max(total_len - start, 0) // size
    return range(start, start + n_slots * size, size)
