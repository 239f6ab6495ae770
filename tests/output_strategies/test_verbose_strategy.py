"""Tests for the bannered verbose layout."""

import pytest

from proj2prompt.output_strategies import OutputStrategy, VerboseOutputStrategy, get_strategy


@pytest.fixture
def strategy():
    return VerboseOutputStrategy()


def test_format_directory(strategy):
    assert strategy.format_directory("src/utils") == "\n#######\nDirectory: src/utils\n#######\n"


def test_format_root_directory(strategy):
    assert strategy.format_directory(".") == "\n#######\nDirectory: .\n#######\n"


def test_format_file_start(strategy):
    assert strategy.format_file_start("src/main.py") == "\n-----\nFile: src/main.py\n-----\n"


def test_format_file_end(strategy):
    assert strategy.format_file_end() == "\n"


def test_paths_are_not_escaped(strategy):
    assert "File: a <b> & c.txt" in strategy.format_file_start("a <b> & c.txt")


def test_get_strategy_verbose():
    assert isinstance(get_strategy("verbose"), VerboseOutputStrategy)


def test_get_strategy_unknown():
    with pytest.raises(ValueError, match="xml"):
        get_strategy("xml")


def test_strategy_is_abstract():
    with pytest.raises(TypeError):
        OutputStrategy()  # type: ignore[abstract]
