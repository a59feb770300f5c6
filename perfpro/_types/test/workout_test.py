#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from datetime import datetime

import pandas as pd
import pytest

from perfpro._types import (
    ActivityData, SummaryStats, Trackpoint, Workout, special_columns)


START = datetime(2024, 3, 1, 6, 30)

workout = Workout(
    athlete='Jane Doe',
    trackpoints=(
        Trackpoint(sec=0, watts=100, cadence=None, hr=None, metres=None),
        Trackpoint(sec=1, watts=110, cadence=None, hr=None, metres=4.5),
        Trackpoint(sec=3, watts=130, cadence=None, hr=None, metres=12.0),
    ),
    stats=SummaryStats(duration_sec=3, avg_watts=113, max_watts=130,
                       has_cadence=False, has_hr=False, record_count=6,
                       total_metres=12.0))

data = workout.to_activitydata(start=START)


def test_immutable():
    with pytest.raises(AttributeError):
        workout.athlete = 'John Doe'
    with pytest.raises(AttributeError):
        workout.trackpoints[0].watts = 0


def test_frame():
    assert isinstance(data, ActivityData)
    assert data.start == START
    assert data.athlete == 'Jane Doe'
    assert list(data.columns) == ['pwr', 'dist']   # empty columns dropped
    assert data.time.name == 'time'
    assert list(data.time.total_seconds()) == [0, 1, 3]


def test_special_columns():
    assert isinstance(data['pwr'], special_columns.Power)
    assert isinstance(data['dist'], special_columns.Distance)
    assert data['pwr'].base_unit == 'watts'
    assert data['dist'].base_unit == 'm'
    assert data['dist'].name == 'dist'


def test_not_special():
    frame = ActivityData({'other': [1, 2]})
    assert type(frame['other']) is pd.Series
