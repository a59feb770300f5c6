#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
General tools that complement the API.

"""
import numpy as np


def round_half_up(values):
    """Round to the nearest integer, halves going up.

    Unlike ``numpy.round`` (and ``round``), which send halves to the nearest
    even number, so 100.5 --> 101 here. Only meant for non-negative
    magnitudes such as watts and rpm.

        >>> round_half_up(np.array([100.5, 101.5, 99.49]))
        array([101, 102,  99])

    Parameters
    ----------
    values : scalar, numpy array or pandas Series

    Returns
    -------
    Same kind as `values`, with an integer dtype.
    """
    return np.floor(values + 0.5).astype(np.int64)


def mean_int(values):
    """Arithmetic mean of `values`, rounded half up. Zero when empty."""
    values = np.asarray(values, dtype=np.float64)
    if not values.size:
        return 0
    return int(round_half_up(values.mean()))


def sensor_present(readings, default, threshold):
    """Was a real sensor connected for this channel?

    Readings that are neither the device's idle `default` nor zero count as
    real. The sensor is present when those make up more than `threshold`
    (a fraction) of all readings.
    """
    readings = np.asarray(readings)
    if not readings.size:
        return False
    real = np.count_nonzero((readings != default) & (readings != 0))
    return bool(real / readings.size > threshold)
