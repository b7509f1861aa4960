"""Tests for the command line interface"""

from typer.testing import CliRunner

from repotyper import __version__
from repotyper.cli import app


runner = CliRunner()


def test_version():
    """Test --version prints the version"""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_default_without_config(tmp_path, monkeypatch):
    """Test launching without a config reports the missing file"""
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_strip_command(tmp_path, monkeypatch):
    """Test strip prints the file without comments"""
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "main.go"
    source.write_text("// Package main\npackage main\n\nfunc main() {} // entry\n")

    result = runner.invoke(app, ["strip", str(source)])

    assert result.exit_code == 0
    assert result.output == "package main\n\nfunc main() {}\n"


def test_chunks_command(tmp_path, monkeypatch):
    """Test chunks lists the sections of a file"""
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "long.txt"
    source.write_text("\n".join(f"line {i}" for i in range(90)))

    result = runner.invoke(app, ["chunks", str(source)])

    assert result.exit_code == 0
    assert "chunk_001" in result.output
    assert "chunk_003" in result.output


def test_chunks_missing_file(tmp_path, monkeypatch):
    """Test a missing file is an error"""
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["chunks", str(tmp_path / "nope.py")])

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_languages_command():
    """Test languages lists the comment profiles"""
    result = runner.invoke(app, ["languages"])

    assert result.exit_code == 0
    assert "python" in result.output
    assert "javascript" in result.output


def test_practice_without_folder(tmp_path, monkeypatch):
    """Test practice needs a folder or a config"""
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["practice"])

    assert result.exit_code == 1
    assert "No folder given" in result.output


def test_practice_missing_folder(tmp_path, monkeypatch):
    """Test practice rejects a folder that does not exist"""
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["practice", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "Folder does not exist" in result.output
