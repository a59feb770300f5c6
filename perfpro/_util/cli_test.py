#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from datetime import datetime

import pytest

from perfpro import tcx
from perfpro._util import cli


@pytest.fixture
def ride(tmp_path, jane_doe):
    file_path = tmp_path / 'Jane_-_Sweet_Spot_-_perfpro.3dp'
    file_path.write_bytes(jane_doe)
    return file_path


def test_convert(ride, capsys):
    status = cli.convert([str(ride), '--start', '2024-07-01T07:00:00',
                          '--tz', 'Europe/London'])

    assert status == 0
    output = ride.with_suffix('.tcx')
    data = tcx.read(str(output))
    assert data.start.to_pydatetime().replace(tzinfo=None) == datetime(
        2024, 7, 1, 6, 0)
    assert list(data['pwr']) == [105, 120]

    out = capsys.readouterr().out
    assert 'Jane Doe' in out
    assert str(output) in out


def test_csv(ride, tmp_path):
    output = tmp_path / 'ride.csv'
    status = cli.convert([str(ride), '--start', '2024-07-01T07:00:00',
                          '--csv', '--output', str(output)])

    assert status == 0
    lines = output.read_text(encoding='utf-8').splitlines()
    assert lines[0] == 'time,pwr'
    assert len(lines) == 3


def test_bad_file(tmp_path, capsys):
    file_path = tmp_path / 'empty.3dp'
    file_path.write_bytes(b'PK\x03\x04')

    status = cli.convert([str(file_path), '--start', '2024-07-01T07:00:00'])

    assert status == 1
    err = capsys.readouterr().err
    assert err == 'File is too small to be a valid .3dp file.\n'
    assert not file_path.with_suffix('.tcx').exists()


@pytest.mark.parametrize('extra', [
    ['--start', 'yesterday'],
    ['--start', '2024-07-01T07:00:00', '--tz', 'Nowhere/Special'],
    ['--start', '2024-07-01T07:00:00', '--csv', '--tz', 'UTC'],
    [],
])
def test_bad_arguments(ride, extra):
    with pytest.raises(SystemExit) as info:
        cli.convert([str(ride)] + extra)
    assert info.value.code == 2


def test_csv_rejects_tz(ride, capsys):
    with pytest.raises(SystemExit):
        cli.convert([str(ride), '--start', '2024-07-01T07:00:00',
                     '--csv', '--tz', 'Europe/London'])
    assert '--tz' in capsys.readouterr().err
    assert not ride.with_suffix('.csv').exists()
