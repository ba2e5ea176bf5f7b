# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""CLI tests: generation, loading, export dispatch and error handling."""
import csv
import json
import sys

import pytest

from orrery.cli import main, run


def _invoke(monkeypatch, *argv):
    monkeypatch.setattr(sys, 'argv', ['orrery', *argv])
    main()


class TestCliGenerate:

    def test_generate_with_count(self, tmp_path, monkeypatch, capsys):
        out = tmp_path / "system.json"
        _invoke(monkeypatch, '-o', str(out), '--seed', '3', '--count', '4',
                '--host-radius', '150')
        data = json.loads(out.read_text(encoding='utf-8'))
        assert data['host']['radius'] == 150.0
        assert len(data['bodies']) == 4
        assert "4 bodies" in capsys.readouterr().out

    def test_seed_reproducible(self, tmp_path, monkeypatch):
        a = tmp_path / "a.json"
        b = tmp_path / "b.json"
        _invoke(monkeypatch, '-o', str(a), '--seed', '21')
        _invoke(monkeypatch, '-o', str(b), '--seed', '21')
        assert a.read_text(encoding='utf-8') == b.read_text(encoding='utf-8')

    def test_rolled_system_ranges(self, tmp_path, monkeypatch):
        out = tmp_path / "s.json"
        _invoke(monkeypatch, '-o', str(out), '--seed', '8')
        data = json.loads(out.read_text(encoding='utf-8'))
        assert 40 <= data['host']['radius'] <= 100
        assert 1 <= len(data['bodies']) <= 10

    def test_inclined_generation(self, tmp_path, monkeypatch):
        out = tmp_path / "s.json"
        _invoke(monkeypatch, '-o', str(out), '--seed', '2', '--count', '6',
                '--max-inclination', '20')
        data = json.loads(out.read_text(encoding='utf-8'))
        incs = [b['orbit']['inclination'] for b in data['bodies']]
        assert any(i > 0 for i in incs)
        assert all(0 <= i <= 20 for i in incs)

    def test_run_returns_system(self, tmp_path):
        system = run(None, seed=1, count=2, host_radius=90.0)
        assert len(system) == 2
        assert system.host.radius == 90.0


class TestCliExport:

    def test_load_and_export_csv(self, tmp_path, monkeypatch, capsys):
        src = tmp_path / "system.json"
        csv_path = tmp_path / "traj.csv"
        _invoke(monkeypatch, '-o', str(src), '--seed', '5', '--count', '2')
        _invoke(monkeypatch, '-i', str(src), '--export-csv', str(csv_path),
                '--duration', '2', '--step', '0.5', '--concurrent')

        with open(csv_path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))
        assert len(rows) == 1 + 2 * 5
        assert "Exported 10 positions" in capsys.readouterr().out


class TestCliErrors:

    def test_missing_input_file(self, tmp_path, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _invoke(monkeypatch, '-i', str(tmp_path / "missing.json"), '-o',
                    str(tmp_path / "o.json"))
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err.lower()

    def test_missing_output_directory(self, tmp_path, monkeypatch, capsys):
        out = tmp_path / "no" / "dir.json"
        with pytest.raises(SystemExit) as exc_info:
            _invoke(monkeypatch, '-o', str(out), '--seed', '1')
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert str(out) in err
        assert "None" not in err
        assert "Input file" not in err

    def test_missing_export_directory_does_not_blame_input(self, tmp_path, monkeypatch, capsys):
        src = tmp_path / "system.json"
        _invoke(monkeypatch, '-o', str(src), '--seed', '5', '--count', '2')
        capsys.readouterr()
        bad = tmp_path / "missing" / "traj.csv"
        with pytest.raises(SystemExit) as exc_info:
            _invoke(monkeypatch, '-i', str(src), '--export-csv', str(bad))
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert str(bad) in err
        assert "Input file" not in err

    def test_invalid_band_reports_error(self, tmp_path, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _invoke(monkeypatch, '-o', str(tmp_path / "o.json"), '--count', '2',
                    '--min-radius', '600', '--max-radius', '500')
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error:")
        assert "min_radius" in err
        assert not (tmp_path / "o.json").exists()

    def test_invalid_step_reports_error(self, tmp_path, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _invoke(monkeypatch, '--export-csv', str(tmp_path / "t.csv"),
                    '--seed', '1', '--step', '0')
        assert exc_info.value.code == 1
        assert "step" in capsys.readouterr().err

    def test_no_output_is_usage_error(self, monkeypatch):
        with pytest.raises(SystemExit) as exc_info:
            _invoke(monkeypatch, '--seed', '1')
        assert exc_info.value.code == 2
