#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from collections import namedtuple
import logging

import numpy as np
from pandas import DataFrame, isna

from perfpro import tools
from perfpro._types import SummaryStats, Trackpoint, Workout
from perfpro._util import exceptions
from perfpro._util.misc import read_cstring, read_field, slot_offsets


log = logging.getLogger(__name__)

# Layout
# ------
HEADER_NAME_OFFSET = 0x10
HEADER_NAME_LEN = 64
RECORD_START = 0x110
RECORD_SIZE = 48

SIGNATURE_OFFSET = 1
SIGNATURE = b'\x00\x01\x00'

RECORD_FIELDS = (   # name, offset within the record, struct format
    ('marker', 0, 'B'),
    ('watts', 4, 'B'),
    ('ms', 32, '<L'),     # since workout start; the only trustworthy clock
    ('cad', 38, 'B'),
    ('km', 40, '<f'),     # cumulative
    ('hr', 46, 'B'),
)

PLACEHOLDER_ATHLETE = 'Unknown'

# Heuristics
# ----------
MAX_DELTA_MS = 5000       # typical spacing is ~550 ms
CADENCE_DEFAULT = 90      # written by the device when no sensor is paired
HR_DEFAULT = 50
SENSOR_THRESHOLD = 0.05   # fraction of records that must look real

DecodeSettings = namedtuple(
    'DecodeSettings',
    'max_delta_ms cadence_default hr_default sensor_threshold')

DEFAULT_SETTINGS = DecodeSettings(
    max_delta_ms=MAX_DELTA_MS,
    cadence_default=CADENCE_DEFAULT,
    hr_default=HR_DEFAULT,
    sensor_threshold=SENSOR_THRESHOLD)


class ThreeDPRecord:
    __slots__ = tuple(name for name, _, _ in RECORD_FIELDS)

    def __init__(self, buffer, offset):
        for name, field_offset, fmt in RECORD_FIELDS:
            setattr(self, name, read_field(buffer, offset + field_offset, fmt))

    @staticmethod
    def is_data(buffer, offset):
        """Header, metadata and footer bytes share the record stride, so the
        signature is the only thing telling a sample apart."""
        start = offset + SIGNATURE_OFFSET
        return buffer[start:start + len(SIGNATURE)] == SIGNATURE

    def __iter__(self):
        for name in self.__slots__:
            yield name, getattr(self, name)


def read_athlete(buffer):
    try:
        name = read_cstring(buffer, HEADER_NAME_OFFSET, HEADER_NAME_LEN)
    except UnicodeDecodeError:
        log.debug('undecodable athlete name, using %r', PLACEHOLDER_ATHLETE)
        name = ''
    return name or PLACEHOLDER_ATHLETE


def gen_records(buffer, *, max_delta_ms=MAX_DELTA_MS):
    """Generator function for iterating over accepted file records.

    "Records" are dictionary objects representing a single raw sample that
    passed validation; i.e. a row in a tabular representation, before any
    resampling. Note this can be passed to the `from_records` constructor
    method of `pandas.DataFrame`s.

    A record whose timestamp jumps more than `max_delta_ms` past the last
    accepted one is a corrupt sentinel (usually at the very end of a file)
    and is dropped without moving the cursor on.
    """
    buffer = bytes(buffer)
    prev_ms = None

    for offset in slot_offsets(len(buffer), RECORD_START, RECORD_SIZE):
        if not ThreeDPRecord.is_data(buffer, offset):
            continue

        record = ThreeDPRecord(buffer, offset)
        if prev_ms is not None and record.ms - prev_ms > max_delta_ms:
            log.debug('dropping record at 0x%x: %d ms after the previous',
                      offset, record.ms - prev_ms)
            continue
        prev_ms = record.ms

        yield dict(record)


def aggregate(records, settings):
    """Resample raw records to one trackpoint per elapsed second."""
    seconds = records['ms'] // 1000
    buckets = records.groupby(seconds)

    has_cadence = tools.sensor_present(
        records['cad'], settings.cadence_default, settings.sensor_threshold)
    has_hr = tools.sensor_present(
        records['hr'], settings.hr_default, settings.sensor_threshold)

    watts = tools.round_half_up(buckets['watts'].mean())
    cadence = tools.round_half_up(buckets['cad'].mean())
    hr = tools.round_half_up(buckets['hr'].mean())

    # Cumulative, so the last positive reading in a second wins. Zeros (and
    # non-finite junk) are placeholders and must never replace a real value.
    km = records['km']
    km = km.where(np.isfinite(km) & (km > 0))
    metres = km.groupby(seconds).last() * 1000

    def optional(value, present):
        return int(value) if present and value else None

    return tuple(
        Trackpoint(sec=int(sec), watts=int(w),
                   cadence=optional(c, has_cadence),
                   hr=optional(h, has_hr),
                   metres=None if isna(m) else float(m))
        for sec, w, c, h, m in zip(watts.index, watts, cadence, hr, metres)
    ), has_cadence, has_hr


def summarise(trackpoints, last_ms, record_count, has_cadence, has_hr):
    powered = [tp.watts for tp in trackpoints if tp.watts > 0]
    total_metres = next((tp.metres for tp in reversed(trackpoints)
                         if tp.metres is not None), 0.0)

    return SummaryStats(
        duration_sec=last_ms // 1000,   # not len(records): sampling is uneven
        avg_watts=tools.mean_int(powered),
        max_watts=max(powered, default=0),
        has_cadence=has_cadence,
        has_hr=has_hr,
        record_count=record_count,
        total_metres=total_metres)


def decode(buffer, *, settings=DEFAULT_SETTINGS):
    """Decode the raw bytes of a .3dp file.

    Parameters
    ----------
    buffer : bytes-like
        The whole file.
    settings : DecodeSettings, optional
        Heuristics for sentinel rejection and sensor detection.

    Returns
    -------
    Workout

    Raises
    ------
    FormatError
        If `buffer` can't hold the header and a single record.
    NoDataError
        If no record survives validation.
    """
    buffer = bytes(buffer)
    if len(buffer) < RECORD_START + RECORD_SIZE:
        raise exceptions.FormatError()

    athlete = read_athlete(buffer)

    records = DataFrame.from_records(
        gen_records(buffer, max_delta_ms=settings.max_delta_ms),
        columns=list(ThreeDPRecord.__slots__))
    if records.empty:
        raise exceptions.NoDataError()

    trackpoints, has_cadence, has_hr = aggregate(records, settings)
    stats = summarise(trackpoints,
                      last_ms=int(records['ms'].iloc[-1]),
                      record_count=len(records),
                      has_cadence=has_cadence, has_hr=has_hr)

    log.info('decoded %d records into %d trackpoints (%d s)',
             stats.record_count, len(trackpoints), stats.duration_sec)

    return Workout(athlete=athlete, trackpoints=trackpoints, stats=stats)


def read(file_path, **kwargs):
    with open(file_path, 'rb') as threedpfile:
        return decode(threedpfile.read(), **kwargs)
