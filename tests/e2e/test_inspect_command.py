#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ******************************************************************************
# Project: FlatGeobuf Inspector (FGBI)
# Author: Eric Robeck <robeckgeo@gmail.com>
#
# Copyright (c) 2025, Eric Robeck
# Licensed under the MIT License
# ******************************************************************************

"""
End-to-End tests for the `fgbinspect` command.

These tests run the CLI as a subprocess, so stdout is a pipe rather than a
terminal: the interactive view must refuse to start and `--stdout` must work.
"""

import json
import subprocess
import sys
from pathlib import Path
import pytest
from tests.fixtures.mock_flatgeobuf_factory import MockFlatGeobuf

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def run_cli(*args):
    return subprocess.run(
        [sys.executable, '-m', 'fgbinspect', *args],
        capture_output=True, text=True, cwd=PROJECT_ROOT
    )


@pytest.mark.e2e
class TestInspectCommand:
    """Test the `fgbinspect` command end-to-end."""

    def test_stdout_dump(self, tmp_path):
        """--stdout prints the header as JSON and exits 0."""
        test_file = MockFlatGeobuf(layer_name='roads', crs='EPSG:3857').save_to_file(tmp_path / 'roads.fgb')

        result = run_cli(str(test_file), '--stdout')

        assert result.returncode == 0, f"Command failed: {result.stderr}"
        data = json.loads(result.stdout)
        assert data['name'] == 'roads'
        assert data['crs']['code'] == 3857
        assert len(data['columns']) == 3

    def test_requires_terminal_without_stdout_flag(self, tmp_path):
        test_file = MockFlatGeobuf().save_to_file(tmp_path / 'layer.fgb')

        result = run_cli(str(test_file))

        assert result.returncode == 1
        assert '--stdout' in result.stderr
        assert result.stdout == ''

    def test_missing_file(self, tmp_path):
        result = run_cli(str(tmp_path / 'missing.fgb'), '--stdout')

        assert result.returncode == 1
        assert 'not found' in result.stderr

    def test_corrupt_file(self, tmp_path):
        test_file = tmp_path / 'corrupt.fgb'
        test_file.write_bytes(b'fgb\x03fgb\x00' + b'\xff\xff\xff\x7f')

        result = run_cli(str(test_file), '--stdout')

        assert result.returncode == 1
        assert result.stdout == ''

    def test_verbose_log_file(self, tmp_path):
        test_file = MockFlatGeobuf().save_to_file(tmp_path / 'layer.fgb')
        log_file = tmp_path / 'run.log'

        result = run_cli(str(test_file), '--stdout', '-v', '--log-file', str(log_file))

        assert result.returncode == 0, f"Command failed: {result.stderr}"
        assert log_file.exists()
        assert 'Reading FlatGeobuf header' in log_file.read_text(encoding='utf-8')
