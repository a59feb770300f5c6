"""
Synthetic .3dp files for the tests.

"""
import struct

import pytest


RECORD_START = 0x110
RECORD_SIZE = 48


def pack_record(ms, watts=0, cad=90, hr=50, km=0.0, marker=0,
                signature=b'\x00\x01\x00'):
    record = bytearray(RECORD_SIZE)
    record[0] = marker
    record[1:4] = signature
    record[4] = watts
    struct.pack_into('<L', record, 32, ms)
    record[38] = cad
    struct.pack_into('<f', record, 40, km)
    record[46] = hr
    return bytes(record)


def build_3dp(records, athlete='Jane Doe', footer=b''):
    """`records` are keyword dicts for `pack_record`, or raw slot bytes."""
    header = bytearray(RECORD_START)
    name = athlete.encode('utf-8') if isinstance(athlete, str) else athlete
    header[0x10:0x10 + len(name)] = name
    slots = (r if isinstance(r, bytes) else pack_record(**r)
             for r in records)
    return bytes(header) + b''.join(slots) + footer


@pytest.fixture
def make_3dp():
    return build_3dp


@pytest.fixture
def jane_doe():
    """Three samples straddling two elapsed seconds, no sensors."""
    return build_3dp([
        {'ms': 0, 'watts': 100},
        {'ms': 550, 'watts': 110},
        {'ms': 1100, 'watts': 120},
    ])
