"""Tests for the nwalign command-line entry point."""

import re
import sys

import pytest

from nwalign.cli import main


def _argv(s1, s2, mx, penalty="-2", *extra):
    return ["-C1", str(s1), "-C2", str(s2), "-U", str(mx), "-V", penalty, *extra]


class TestSuccess:

    def test_worked_example(self, input_files, tmp_path, capsys):
        s1, s2, mx = input_files("AC", "AG")
        out = tmp_path / "aln.dot"
        assert main(_argv(s1, s2, mx, "-2", "-o", str(out))) == 0

        stdout = capsys.readouterr().out
        assert "Aligned sequence 1: AC" in stdout
        assert "Aligned sequence 2: AG" in stdout
        assert "Optimal score: 0" in stdout
        assert "Match percentage: 50.00%" in stdout
        assert "reading sequences and matrix..." in stdout
        assert out.exists()
        assert "Match percentage: 50.00%" in out.read_text()

    def test_empty_second_sequence(self, input_files, tmp_path, capsys):
        s1, s2, mx = input_files("A", "")
        out = tmp_path / "aln.dot"
        assert main(_argv(s1, s2, mx, "-3", "-o", str(out))) == 0
        stdout = capsys.readouterr().out
        assert "Aligned sequence 2: -" in stdout
        assert "Optimal score: -3" in stdout
        assert "Match percentage: 0.00%" in stdout

    def test_default_output_in_cwd(self, input_files, tmp_path, monkeypatch):
        s1, s2, mx = input_files()
        monkeypatch.chdir(tmp_path)
        assert main(_argv(s1, s2, mx)) == 0
        assert (tmp_path / "alignment.dot").exists()

    def test_quiet_hides_progress(self, input_files, tmp_path, capsys):
        s1, s2, mx = input_files()
        assert main(_argv(s1, s2, mx, "-2", "-q", "-o", str(tmp_path / "a.dot"))) == 0
        stdout = capsys.readouterr().out
        assert "reading sequences" not in stdout
        assert "Optimal score: 0" in stdout

    def test_row_width(self, input_files, tmp_path):
        s1, s2, mx = input_files("ACGTACG", "ACGTACG")
        out = tmp_path / "aln.dot"
        assert main(_argv(s1, s2, mx, "-2", "--row-width", "3", "-o", str(out))) == 0
        assert len(re.findall(r"rank\s*=\s*\"?same", out.read_text())) == 3


class TestUsage:

    def test_no_arguments(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 1
        assert "usage:" in capsys.readouterr().err

    def test_missing_penalty(self, input_files, tmp_path, monkeypatch):
        s1, s2, mx = input_files()
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as excinfo:
            main(["-C1", str(s1), "-C2", str(s2), "-U", str(mx)])
        assert excinfo.value.code == 1
        assert not (tmp_path / "alignment.dot").exists()

    def test_bad_row_width(self, input_files):
        s1, s2, mx = input_files()
        with pytest.raises(SystemExit) as excinfo:
            main(_argv(s1, s2, mx, "-2", "--row-width", "0"))
        assert excinfo.value.code == 1

    def test_partial_arguments(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["-C1", "a"])
        assert excinfo.value.code == 1
        assert "usage:" in capsys.readouterr().err


class TestFatalErrors:

    def test_non_integer_penalty(self, input_files, tmp_path, capsys):
        s1, s2, mx = input_files()
        out = tmp_path / "aln.dot"
        assert main(_argv(s1, s2, mx, "abc", "-o", str(out))) == 1
        captured = capsys.readouterr()
        assert "error:" in captured.err
        assert "integer" in captured.err
        assert not out.exists()

    def test_missing_sequence_file(self, input_files, tmp_path, capsys):
        _, s2, mx = input_files()
        missing = tmp_path / "missing.txt"
        assert main(_argv(missing, s2, mx, "-2", "-o", str(tmp_path / "a.dot"))) == 1
        assert str(missing) in capsys.readouterr().err

    def test_invalid_symbol_writes_nothing(self, input_files, tmp_path, capsys):
        s1, s2, mx = input_files("ACGN", "ACG")
        out = tmp_path / "aln.dot"
        assert main(_argv(s1, s2, mx, "-2", "-o", str(out))) == 1
        assert "'N'" in capsys.readouterr().err
        assert not out.exists()

    def test_short_matrix(self, input_files, tmp_path, capsys):
        s1, s2, mx = input_files(matrix="1 -1 -1 -1\n")
        assert main(_argv(s1, s2, mx, "-2", "-o", str(tmp_path / "a.dot"))) == 1
        assert "error:" in capsys.readouterr().err

    def test_unwritable_output(self, input_files, tmp_path, capsys):
        s1, s2, mx = input_files()
        out = tmp_path / "no_such_dir" / "aln.dot"
        assert main(_argv(s1, s2, mx, "-2", "-o", str(out))) == 1
        assert "cannot write" in capsys.readouterr().err


class TestPlotOption:

    def test_missing_plot_extra_writes_nothing(self, input_files, tmp_path, capsys, monkeypatch):
        monkeypatch.setitem(sys.modules, "nwalign.plot", None)
        s1, s2, mx = input_files()
        out = tmp_path / "aln.dot"
        args = _argv(s1, s2, mx, "-2", "-o", str(out), "--plot", str(tmp_path / "m.png"))
        assert main(args) == 1
        captured = capsys.readouterr()
        assert "nwalign[plot]" in captured.err
        assert "reading sequences" not in captured.out
        assert not out.exists()

    def test_unsupported_image_format(self, input_files, tmp_path, capsys):
        pytest.importorskip("matplotlib")
        pytest.importorskip("seaborn")
        s1, s2, mx = input_files()
        out = tmp_path / "aln.dot"
        args = _argv(s1, s2, mx, "-2", "-o", str(out), "--plot", str(tmp_path / "m.xyz"))
        assert main(args) == 1
        captured = capsys.readouterr()
        assert "error:" in captured.err
        assert "xyz" in captured.err
        assert "writing Graphviz file" not in captured.out
        assert not out.exists()

    def test_plot_written(self, input_files, tmp_path):
        matplotlib = pytest.importorskip("matplotlib")
        pytest.importorskip("seaborn")
        matplotlib.use("Agg")
        s1, s2, mx = input_files("ACGT", "AGT")
        out = tmp_path / "aln.dot"
        image = tmp_path / "matrix.png"
        assert main(_argv(s1, s2, mx, "-2", "-o", str(out), "--plot", str(image))) == 0
        assert out.exists()
        assert image.stat().st_size > 0
