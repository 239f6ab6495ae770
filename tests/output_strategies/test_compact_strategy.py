"""Tests for the compact layout."""

from proj2prompt.output_strategies import CompactOutputStrategy, get_strategy


def test_format_directory():
    assert CompactOutputStrategy().format_directory("src/utils") == "src/utils/\n"


def test_format_root_directory():
    assert CompactOutputStrategy().format_directory(".") == "./\n"


def test_format_file():
    strategy = CompactOutputStrategy()
    section = strategy.format_file_start("src/main.py") + "print()" + strategy.format_file_end()
    assert section == "src/main.py\nprint()\n"


def test_get_strategy_compact():
    assert isinstance(get_strategy("compact"), CompactOutputStrategy)
