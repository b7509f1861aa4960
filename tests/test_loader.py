"""Tests for project loading"""

import asyncio
from pathlib import Path

from repotyper.core import loader
from repotyper.core.loader import discover_files, load_file, load_project, load_project_async


def write(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content.encode("utf-8"))
    return path


def make_tree(root: Path) -> None:
    write(root, "src/app.js", "// header\nconst a = 1; // one\n")
    write(root, "windows.py", "x = 1\r\n# note\r\ny = 2\r\n")
    write(root, "README.md", "# Title\n")
    write(root, "image.png", "not really a png")
    write(root, "node_modules/dep/index.js", "module.exports = 1;\n")
    write(root, ".hidden/secret.py", "x = 1\n")


def test_discover_files(tmp_path):
    """Test ignored directories and non-code files are skipped"""
    make_tree(tmp_path)

    found = [p.relative_to(tmp_path).as_posix() for p in discover_files(tmp_path)]

    assert found == ["README.md", "windows.py", "src/app.js"]


def test_load_project(tmp_path):
    """Test files are stripped, normalized and chunked"""
    make_tree(tmp_path)

    project = load_project(tmp_path)

    assert project.name == tmp_path.name
    assert [f.path for f in project.files] == ["README.md", "windows.py", "src/app.js"]

    app = project.get_file("src/app.js")
    assert app.language == "javascript"
    assert app.content == "const a = 1;"
    assert app.chunks[0].title == "Complete File"

    windows = project.get_file("windows.py")
    assert "\r" not in windows.original_content
    assert windows.content == "x = 1\ny = 2"


def test_load_project_async_matches_sync(tmp_path):
    """Test concurrent loading gives the same project"""
    make_tree(tmp_path)

    assert asyncio.run(load_project_async(tmp_path)) == load_project(tmp_path)


def test_load_file_language_override(tmp_path):
    """Test an explicit language wins over the extension"""
    path = write(tmp_path, "script", "echo hi # greet\n")

    source = load_file(path, tmp_path, language="shell")

    assert source.path == "script"
    assert source.content == "echo hi"


def test_undecodable_bytes_are_replaced(tmp_path):
    """Test invalid UTF-8 does not stop loading"""
    path = tmp_path / "data.txt"
    path.write_bytes(b"ok \xff\n")

    source = load_file(path, tmp_path)

    assert source.content.startswith("ok ")


def test_unreadable_file_is_skipped(tmp_path, monkeypatch):
    """Test read errors are logged and the file left out"""
    make_tree(tmp_path)
    real_load_file = loader.load_file

    def flaky_load_file(file_path, root=None, language=None):
        if file_path.name == "windows.py":
            raise PermissionError("denied")
        return real_load_file(file_path, root, language)

    monkeypatch.setattr(loader, "load_file", flaky_load_file)

    project = load_project(tmp_path)

    assert [f.path for f in project.files] == ["README.md", "src/app.js"]
