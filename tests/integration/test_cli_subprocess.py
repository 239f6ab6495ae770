"""Integration tests running the installed command in a subprocess.

These cover what in-process tests cannot: the module entry point, exit codes seen by a
shell, and output written through the real stdout.
"""

import subprocess
import sys

import pytest

# Slow; only run when --run-cli-tests is given
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


def run_cli(*args, cwd=None):
    return subprocess.run(
        [sys.executable, "-m", "proj2prompt", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
    )


@pytest.fixture
def temp_project(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("print('hello')\n")
    (tmp_path / "logo.bin").write_bytes(bytes(range(16)))
    (tmp_path / ".gitignore").write_text("*.log\n")
    (tmp_path / "debug.log").write_text("noise")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    return tmp_path


def test_basic_run(temp_project):
    result = run_cli(str(temp_project))

    assert result.returncode == 0
    assert "Directory: .\n" in result.stdout
    assert "File: src/main.py" in result.stdout
    assert "[Binary file: logo.bin, Size: 16 bytes" in result.stdout
    assert "debug.log" not in result.stdout
    assert ".git/" not in result.stdout


def test_default_directory_is_cwd(temp_project):
    result = run_cli(cwd=temp_project)

    assert result.returncode == 0
    assert "File: src/main.py" in result.stdout


def test_output_file(temp_project):
    output_file = temp_project / "prompt.txt"

    result = run_cli(str(temp_project), "-o", str(output_file))

    assert result.returncode == 0
    assert f"Output written to file: {output_file}" in result.stdout
    assert "File: src/main.py" in output_file.read_text(encoding="utf-8")


def test_missing_directory(tmp_path):
    result = run_cli(str(tmp_path / "missing"))

    assert result.returncode == 1
    assert result.stderr.startswith("Error exploring directories:")


def test_version():
    result = run_cli("--version")

    assert result.returncode == 0
    assert result.stdout.startswith("proj2prompt ")


def test_invalid_option():
    result = run_cli("--format", "xml")
    assert result.returncode == 2
