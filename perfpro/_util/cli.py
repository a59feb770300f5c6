#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
convert is installed as an executable console_script with this package.

"""
from argparse import ArgumentParser, ArgumentTypeError
from datetime import datetime
from functools import partial
import logging
from os import path
import sys

import pytz

from perfpro import threedp, tcx
from perfpro._util import console, exceptions


START_FMT = '%Y-%m-%dT%H:%M:%S'   # local wall-clock time, no offset


def start_time(text):
    try:
        return datetime.strptime(text, START_FMT)
    except ValueError:
        raise ArgumentTypeError(
            'expected YYYY-MM-DDTHH:MM:SS, got %r' % text) from None


def zone_name(text):
    try:
        pytz.timezone(text)
    except pytz.UnknownTimeZoneError:
        raise ArgumentTypeError('unknown timezone %r' % text) from None
    return text


def make_parser():
    parser = ArgumentParser(
        description='convert a PerfPro .3dp workout to TCX')

    parser.add_argument('input',
                        type=str,
                        help='.3dp file to read')
    parser.add_argument('--start',
                        type=start_time,
                        required=True,
                        metavar='YYYY-MM-DDTHH:MM:SS',
                        help='when the workout began')
    parser.add_argument('--tz',
                        type=zone_name,
                        default=None,
                        help='optional; timezone of --start (default UTC)')
    parser.add_argument('--output',
                        type=str,
                        metavar='filename',
                        default=None,
                        help='optional; file to write to')
    parser.add_argument('--csv',
                        action='store_true',
                        help='write the per-second data as CSV instead')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='log decoding details')
    return parser


def convert(argv=None):

    # Argument handling
    parser = make_parser()
    args = parser.parse_args(argv)
    if args.csv and args.tz:
        parser.error('--tz only applies to TCX output')

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')

    # Script begins
    try:
        workout = threedp.read(args.input)
    except exceptions.PerfProError as e:
        print(str(e), file=sys.stderr)
        return 1

    ext = '.csv' if args.csv else '.tcx'
    output = args.output or path.splitext(args.input)[0] + ext

    if args.csv:
        data = workout.to_activitydata()   # offsets only, no wall clock
        write = partial(data.to_csv,
                        na_rep='NA', index_label='time', encoding='utf-8')
        write(output)
    else:
        tcx.write(workout, args.start, output, tz_str=args.tz)

    console.print_summary(workout)
    console.printd('wrote ' + output, 'green')

    return 0


if __name__ == '__main__':
    sys.exit(convert())
