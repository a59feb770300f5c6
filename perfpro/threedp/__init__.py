"""
Decode PerfPro ".3dp" workout files.

The format is undocumented; everything here was worked out by poking at
files exported from PerfPro Studio. What we know:

    ========  =======  ===============================================
    Offset    Size     Contents
    ========  =======  ===============================================
    0x10      64       Athlete name (UTF-8, null terminated)
    0x110     48 * n   Record slots, one raw sample each
    ========  =======  ===============================================

Not every slot holds a sample. Metadata and a plaintext footer of interval
labels sit on the same 48-byte stride, so samples are picked out by a
three-byte signature (``00 01 00`` at offsets 1-3). Within a sample:

    ========  =======  ===============================================
    Offset    Type     Contents
    ========  =======  ===============================================
    0         uint8    Segment marker (unused)
    4         uint8    Power (W)
    32        uint32   Milliseconds since the start of the workout
    38        uint8    Cadence (rpm)
    40        float32  Cumulative distance (km)
    46        uint8    Heart rate (bpm)
    ========  =======  ===============================================

All multi-byte values are little-endian. Samples arrive roughly every 550 ms
but not regularly, so the embedded timestamp is the only reliable clock.

"""
from perfpro.threedp._reading import decode, gen_records, read
from perfpro.threedp._reading import DecodeSettings, DEFAULT_SETTINGS
