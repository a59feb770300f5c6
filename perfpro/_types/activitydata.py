#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import numpy as np
from pandas import TimedeltaIndex, to_timedelta

from perfpro._types import columns as special_columns
from perfpro._types.base import DataFrameSubclass


class ActivityData(DataFrameSubclass):
    _metadata = ['start', 'athlete']

    def __getitem__(self, key):
        """Create the illusion of Series subclasses in the DataFrame."""
        item = super().__getitem__(key)
        try:
            return special_columns.REGISTRY[key](item)
        except (KeyError, TypeError):   # not special, or not a single column
            return item

    @property
    def time(self):   # makes accessing the index more readable
        if isinstance(self.index, TimedeltaIndex):
            return self.index
        else:
            # because recursion problems with super().__getattr__()
            raise AttributeError('index is not TimedeltaIndex')

    # Private methods
    # ---------------
    def _finish_up(self, *, column_spec, start=None, timeoffsets=None):
        """A pseudo-init method, used internally.

        `timeoffsets` are seconds from the start of the activity.
        """
        for old_key, column_cls in column_spec.items():
            try:
                old_column = self.pop(old_key)  # no default
            except KeyError:
                continue

            new = column_cls(old_column)
            self[new.colname] = new

        self.start = start
        if timeoffsets is not None:
            self.index = TimedeltaIndex(
                to_timedelta(np.asarray(timeoffsets, dtype=np.float64),
                             unit='s'),
                name='time')

        # No point hanging on to completely empty columns!
        self.dropna(axis=1, how='all', inplace=True)
