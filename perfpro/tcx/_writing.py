#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Render a decoded workout as a Garmin Training Center (TCX) document.

Everything goes into one activity with one lap; the segment markers in the
source aren't decoded, so there's nothing to split laps on.

"""
from datetime import timedelta

import pytz


TZ_UTC = pytz.timezone('UTC')

# According to Garmin, all times are stored in UTC.
DATETIME_FMT = '%Y-%m-%dT%H:%M:%SZ'

EXT_NS = 'http://www.garmin.com/xmlschemas/ActivityExtension/v2'

DOCUMENT = '''\
<?xml version="1.0" encoding="UTF-8"?>
<TrainingCenterDatabase
  xmlns="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2"
  xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
  xsi:schemaLocation="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2
    http://www.garmin.com/xmlschemas/TrainingCenterDatabasev2.xsd">
  <Activities>
    <Activity Sport="Biking">
      <Id>{start}</Id>
      <Lap StartTime="{start}">
        <TotalTimeSeconds>{duration}</TotalTimeSeconds>
        <DistanceMeters>{distance:.2f}</DistanceMeters>
        <Calories>0</Calories>
        <Intensity>Active</Intensity>
        <TriggerMethod>Manual</TriggerMethod>
        <Track>
{trackpoints}
        </Track>
        <Extensions>
          <ns3:LX xmlns:ns3="{ext_ns}">
            <ns3:AvgWatts>{avg_watts}</ns3:AvgWatts>
            <ns3:MaxWatts>{max_watts}</ns3:MaxWatts>
          </ns3:LX>
        </Extensions>
      </Lap>
    </Activity>
  </Activities>
</TrainingCenterDatabase>
'''

TRACKPOINT = '''\
          <Trackpoint>
            <Time>{time}</Time>
{hr}{distance}            <Extensions>
              <ns3:TPX xmlns:ns3="{ext_ns}">
              <ns3:Watts>{watts}</ns3:Watts>
{cadence}              </ns3:TPX>
            </Extensions>
          </Trackpoint>'''

HR_LINE = '            <HeartRateBpm><Value>%d</Value></HeartRateBpm>\n'
DISTANCE_LINE = '            <DistanceMeters>%.2f</DistanceMeters>\n'
CADENCE_LINE = '              <ns3:RunCadence>%d</ns3:RunCadence>\n'


def utc_start(start, tz_str=None):
    """Pin `start` to UTC, dropping anything below a second.

    Naive datetimes are taken to be in `tz_str` (UTC if not given).
    """
    if start.tzinfo is None:
        timezone = pytz.timezone(tz_str) if tz_str is not None else TZ_UTC
        start = timezone.localize(start)
    return start.astimezone(TZ_UTC).replace(microsecond=0)


def format_trackpoint(trackpoint, start):
    time = start + timedelta(seconds=trackpoint.sec)
    return TRACKPOINT.format(
        time=time.strftime(DATETIME_FMT),
        hr=HR_LINE % trackpoint.hr if trackpoint.hr is not None else '',
        distance=(DISTANCE_LINE % trackpoint.metres
                  if trackpoint.metres is not None else ''),
        cadence=(CADENCE_LINE % trackpoint.cadence
                 if trackpoint.cadence is not None else ''),
        watts=trackpoint.watts,
        ext_ns=EXT_NS)


def serialize(workout, start, *, tz_str=None):
    """Render `workout` as TCX text.

    Parameters
    ----------
    workout : Workout
        As returned by ``perfpro.threedp.decode``.
    start : datetime
        When the workout began.
    tz_str : str, optional
        Timezone name (e.g. 'Europe/London') used for a naive `start`.

    Returns
    -------
    str
    """
    start = utc_start(start, tz_str)
    stats = workout.stats

    trackpoints = '\n'.join(format_trackpoint(tp, start)
                            for tp in workout.trackpoints)

    return DOCUMENT.format(
        start=start.strftime(DATETIME_FMT),
        duration=stats.duration_sec,
        distance=stats.total_metres or 0,
        trackpoints=trackpoints,
        avg_watts=stats.avg_watts,
        max_watts=stats.max_watts,
        ext_ns=EXT_NS)


def write(workout, start, file_path, *, tz_str=None):
    document = serialize(workout, start, tz_str=tz_str)
    with open(file_path, 'w', encoding='utf-8') as tcxfile:
        tcxfile.write(document)
