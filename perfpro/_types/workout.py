#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
The decoded workout. Everything here is immutable once built.

"""
from collections import namedtuple

from perfpro._types import columns as special_columns
from perfpro._types.activitydata import ActivityData


COLUMN_SPEC = {
    'watts': special_columns.Power,
    'cadence': special_columns.Cadence,
    'hr': special_columns.HeartRate,
    'metres': special_columns.Distance,
}


class Trackpoint(namedtuple('Trackpoint', 'sec watts cadence hr metres')):
    """One elapsed second of a workout.

    Attributes
    ----------
    sec : int
        Seconds since the start of the workout.
    watts : int
    cadence, hr : int or None
        None unless a real sensor was detected for the whole file.
    metres : float or None
        Cumulative distance, None if the second had no distance reading.
    """
    __slots__ = ()


class SummaryStats(namedtuple('SummaryStats', (
        'duration_sec', 'avg_watts', 'max_watts', 'has_cadence', 'has_hr',
        'record_count', 'total_metres'))):
    __slots__ = ()


class Workout(namedtuple('Workout', 'athlete trackpoints stats')):
    __slots__ = ()

    def to_activitydata(self, start=None):
        """One row per trackpoint, indexed by time since `start`."""
        data = ActivityData.from_records(
            (tp._asdict() for tp in self.trackpoints),
            columns=list(Trackpoint._fields))

        seconds = data.pop('sec')
        data._finish_up(column_spec=COLUMN_SPEC,
                        start=start, timeoffsets=seconds)
        data.athlete = self.athlete

        return data
