#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from perfpro._types.base import SeriesSubclass


REGISTRY = {}    # grows at import-time via the below metaclass


class SpecialRegistrar(type):
    def __init__(cls, name, bases, namespace):
        if name != 'SpecialColumn':
            REGISTRY[cls.colname] = cls
        super().__init__(name, bases, namespace)


class SpecialColumn(SeriesSubclass, metaclass=SpecialRegistrar):
    def __init__(self, data, *args, **kwargs):
        super().__init__(data, *args, **kwargs)
        self.name = self.__class__.colname     # use *class* attribute


class Cadence(SpecialColumn):
    colname = 'cad'
    base_unit = 'rpm'


class Distance(SpecialColumn):
    colname = 'dist'
    base_unit = 'm'


class HeartRate(SpecialColumn):
    colname = 'hr'
    base_unit = 'bpm'


class Power(SpecialColumn):
    colname = 'pwr'
    base_unit = 'watts'
