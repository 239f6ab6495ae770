import logging
import os
import re
import tempfile

import pytest

from proj2prompt.exceptions import IgnoreFileError
from proj2prompt.exclusion_rules.git_rules import GitIgnoreExclusionRules, load_ignore_rules


@pytest.fixture
def temp_gitignore():
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        f.write("# Build artefacts\n")
        f.write("*.txt\n")
        f.write("!important.txt\n")
        f.write("\n")
        f.write("subdir/\n")
        f.write("*.py[cod]\n")
        f.write("**/__pycache__/\n")
        f.write("/dist/\n")
    yield f.name
    os.unlink(f.name)


@pytest.fixture
def temp_npmignore():
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        f.write("*.log\n")
        f.write("node_modules/\n")
        f.write("!important.log\n")
    yield f.name
    os.unlink(f.name)


@pytest.mark.parametrize(
    "path,expected",
    [
        ("file.txt", True),
        ("important.txt", False),
        ("file.py", False),
        ("subdir/", True),
        ("subdir/file.py", True),
        ("another_dir/file.txt", True),
        ("another_dir/file.py", False),
        ("nested/subdir/", True),
        ("file.pyc", True),
        ("__pycache__/", True),
        ("lib/__pycache__/", True),
        ("lib/__pycache__/cache_file.py", True),
        # Anchored directory pattern only applies at the root
        ("dist/", True),
        ("src/dist/", False),
        # Comment lines are not patterns
        ("# Build artefacts", False),
    ],
)
def test_gitignore_exclusion_rules(temp_gitignore, path, expected):
    rules = GitIgnoreExclusionRules(temp_gitignore)
    assert rules.exclude(path) == expected, f"Failed for path: {path}"


def test_directory_pattern_does_not_match_files(temp_gitignore):
    rules = GitIgnoreExclusionRules(temp_gitignore)
    assert rules.exclude("subdir/")
    assert not rules.exclude("subdir")


def test_negation_reincludes_later_match():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.log")
    rules.add_rule("!keep.log")

    assert rules.exclude("other.log")
    assert rules.exclude("logs/other.log")
    assert not rules.exclude("keep.log")


def test_gitignore_exclusion_rules_empty_file():
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        pass
    try:
        rules = GitIgnoreExclusionRules(f.name)
        assert not rules.exclude("any_file.txt"), "Empty .gitignore should not exclude any files"
    finally:
        os.unlink(f.name)


def test_gitignore_exclusion_rules_nonexistent_file():
    with pytest.raises(FileNotFoundError):
        GitIgnoreExclusionRules("nonexistent_file")


def test_multiple_exclusion_files(temp_gitignore, temp_npmignore):
    """Test combining patterns from multiple exclusion files."""
    rules = GitIgnoreExclusionRules([temp_gitignore, temp_npmignore])

    assert rules.exclude("file.txt")
    assert not rules.exclude("important.txt")
    assert rules.exclude("debug.log")
    assert not rules.exclude("important.log")
    assert rules.exclude("node_modules/")


def test_load_rules_appends_to_existing(temp_gitignore):
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.md")
    rules.load_rules(temp_gitignore)

    assert rules.exclude("README.md")
    assert rules.exclude("notes.txt")


def test_undecodable_file_raises_ignore_file_error(tmp_path):
    rules_file = tmp_path / ".gitignore"
    rules_file.write_bytes(b"\xff\xfe*.log\n")

    with pytest.raises(IgnoreFileError) as excinfo:
        GitIgnoreExclusionRules(rules_file)

    assert excinfo.value.file_path == str(rules_file)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_invalid_pattern_keeps_previous_rules():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.log")

    with pytest.raises(IgnoreFileError) as excinfo:
        rules.add_rule("[z-a]")

    assert excinfo.value.file_path == "<rule>"
    assert isinstance(excinfo.value.__cause__, (re.error, ValueError))
    assert rules.exclude("app.log")
    assert not rules.exclude("m")


def test_invalid_pattern_in_file_raises_ignore_file_error(tmp_path):
    rules_file = tmp_path / ".gitignore"
    rules_file.write_text("*.log\n[z-a]\n")

    with pytest.raises(IgnoreFileError) as excinfo:
        GitIgnoreExclusionRules(rules_file)

    assert excinfo.value.file_path == str(rules_file)
    assert isinstance(excinfo.value.__cause__, (re.error, ValueError))


class TestLoadIgnoreRules:
    def test_missing_file_returns_none(self, tmp_path):
        assert load_ignore_rules(tmp_path) is None

    def test_loads_root_gitignore(self, tmp_path):
        (tmp_path / ".gitignore").write_text("build/\n")

        rules = load_ignore_rules(tmp_path)

        assert rules is not None
        assert rules.exclude("build/")

    def test_custom_file_name(self, tmp_path):
        (tmp_path / ".gitignore").write_text("*.py\n")
        (tmp_path / ".promptignore").write_text("*.md\n")

        rules = load_ignore_rules(tmp_path, ".promptignore")

        assert rules is not None
        assert rules.exclude("README.md")
        assert not rules.exclude("main.py")

    def test_directory_named_like_ignore_file_is_ignored(self, tmp_path):
        (tmp_path / ".gitignore").mkdir()
        assert load_ignore_rules(tmp_path) is None

    def test_malformed_file_logs_warning_and_returns_none(self, tmp_path, caplog):
        (tmp_path / ".gitignore").write_bytes(b"\xff\xfe\x00bad\n")

        with caplog.at_level(logging.WARNING, logger="proj2prompt.exclusion_rules.git_rules"):
            rules = load_ignore_rules(tmp_path)

        assert rules is None
        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert "failed to compile" in caplog.records[0].getMessage()
        assert ".gitignore" in caplog.records[0].getMessage()

    def test_invalid_pattern_logs_warning_and_returns_none(self, tmp_path, caplog):
        (tmp_path / ".gitignore").write_text("build/\n[z-a]\n")

        with caplog.at_level(logging.WARNING, logger="proj2prompt.exclusion_rules.git_rules"):
            rules = load_ignore_rules(tmp_path)

        assert rules is None
        assert "failed to compile" in caplog.text
