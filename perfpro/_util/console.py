#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Prettifying console output.

"""
TEXT_DECORATIONS = {
    'header': '\033[95m',
    'green': '\033[92m',
    'warning': '\033[93m',
    'fail': '\033[91m',
    'bold': '\033[1m',
    'end': '\033[0m',
}

KM_TO_MILES = 0.621371


def decorate(text, *decorations):
    """Return a text string with ANSI escape codes pre- and appended.

    Parameters
    ----------
    text : str
        Text to be decorated.
    *decorations : str
        Keys of `TEXT_DECORATIONS`.
    """
    decors = ''.join(TEXT_DECORATIONS[d] for d in decorations)
    end = TEXT_DECORATIONS['end']
    return decors + text + end


def printd(text, *decorations, **kwargs):
    """Print decorated."""
    to_write = decorate(text, *decorations)
    print(to_write, **kwargs)


def format_duration(total_sec):
    """
        >>> format_duration(3725)
        '1h 2m 5s'
        >>> format_duration(65)
        '1m 5s'
    """
    hours, rest = divmod(total_sec, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours > 0:
        return '%dh %dm %ds' % (hours, minutes, seconds)
    return '%dm %ds' % (minutes, seconds)


def summary_rows(workout):
    """(label, value) pairs describing a decoded workout."""
    stats = workout.stats

    rows = [
        ('Athlete', workout.athlete),
        ('Duration', format_duration(stats.duration_sec)),
        ('Avg Power', '%d W' % stats.avg_watts),
        ('Max Power', '%d W' % stats.max_watts),
    ]

    if stats.total_metres > 0:
        km = stats.total_metres / 1000
        miles = km * KM_TO_MILES
        hours = stats.duration_sec / 3600
        kph, mph = (km / hours, miles / hours) if hours > 0 else (0, 0)
        rows += [
            ('Distance', '%.2f mi (%.2f km)' % (miles, km)),
            ('Avg Speed', '%.1f mph (%.1f km/h)' % (mph, kph)),
        ]

    rows += [
        ('Cadence', 'Included (sensor detected)' if stats.has_cadence
                    else 'Not included (no sensor)'),
        ('Heart Rate', 'Included (HR monitor detected)' if stats.has_hr
                       else 'Not included (no monitor)'),
        ('Trackpoints', '{:,}'.format(len(workout.trackpoints))),
    ]
    return rows


def print_summary(workout, **kwargs):
    rows = summary_rows(workout)
    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        print(decorate(label.ljust(width), 'bold'), value, **kwargs)
