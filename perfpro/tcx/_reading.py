#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Read TCX documents (such as the ones `_writing` produces) back into an
`ActivityData`, which is handy for checking a conversion.

"""
import re

from pandas import to_datetime

from perfpro._types import ActivityData, special_columns
from perfpro._util import exceptions
from perfpro._util.xml_reading import (
    gen_nodes, recursive_text_extract, sans_ns)
from perfpro.tcx._writing import DATETIME_FMT


CAP = re.compile(r'([A-Z]{1})')

# Despite what the schema says, there are files out
# in the wild with fractional seconds...
DATETIME_FMT_WITH_FRAC = '%Y-%m-%dT%H:%M:%S.%fZ'

COLUMN_SPEC = {
    'distance_meters': special_columns.Distance,
    'heart_rate_bpm': special_columns.HeartRate,
    'run_cadence': special_columns.Cadence,
    'watts': special_columns.Power,
}


def titlecase_to_undercase(string):
    """ ColumnName --> column_name """
    under = CAP.sub(lambda pattern: '_' + pattern.group(1).lower(), string)
    return under.lstrip('_')


def gen_records(file_path):
    """Generator function for iterating over trackpoints.

    Each is a dictionary of the raw (string) leaf values, keyed by tag.
    """
    nodes = gen_nodes(file_path, ('Trackpoint',), with_root=True)

    root = next(nodes)
    if sans_ns(root.tag) != 'TrainingCenterDatabase':
        raise exceptions.InvalidFileError('tcx')

    trackpoints = nodes
    for trkpt in trackpoints:
        yield recursive_text_extract(trkpt)


def read_and_format(file_path):
    data = ActivityData.from_records(gen_records(file_path))
    times = data.pop('Time')                    # should always be there
    data = data.astype('float64')               # try and make numeric

    # Prettier column names!
    data.columns = list(map(titlecase_to_undercase, data.columns))

    try:
        timestamps = to_datetime(times, format=DATETIME_FMT, utc=True)
    except ValueError:  # bad format, try with fractional seconds
        timestamps = to_datetime(times, format=DATETIME_FMT_WITH_FRAC, utc=True)

    timeoffsets = (timestamps - timestamps.iloc[0]).dt.total_seconds()
    data._finish_up(column_spec=COLUMN_SPEC,
                    start=timestamps.iloc[0], timeoffsets=timeoffsets)

    return data
