#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions for this package.

"""


class PerfProError(Exception):
    """Base exception."""
    _default_message = ''

    def __init__(self, message=None):
        super().__init__(message if message else self._default_message)


class InvalidFileError(PerfProError):
    def __init__(self, fmt):
        message = "this doesn't look like a %s file!" % fmt
        super().__init__(message)


# Exceptions specific to the threedp subpackage
# ---------------------------------------------
class FormatError(PerfProError):
    _default_message = 'File is too small to be a valid .3dp file.'


class NoDataError(PerfProError):
    _default_message = ('No valid data records found, '
                        'this may not be a .3dp file.')
