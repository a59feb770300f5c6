#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from pandas import DataFrame, Series


__all__ = ('DataFrameSubclass', 'SeriesSubclass')  # using * import elsewhere


class DataFrameSubclass(DataFrame):
    _metadata = []

    @property
    def _constructor(self):
        return self.__class__

    def __finalize__(self, other, method=None, **kwargs):
        """Propagate metadata from other to self."""
        for name in self._metadata:
            object.__setattr__(self, name, getattr(other, name, None))
        return self


class SeriesSubclass(Series):
    _metadata = ['_name']

    @property
    def _constructor(self):
        return self.__class__

    def __finalize__(self, other, method=None, **kwargs):
        """Propagate metadata from other to self."""
        for name in self._metadata:
            object.__setattr__(self, name, getattr(other, name, None))
        return self
