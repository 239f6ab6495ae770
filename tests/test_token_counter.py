from unittest.mock import MagicMock, patch

import pytest

from proj2prompt.exceptions import TokenizerNotAvailableError
from proj2prompt.token_counter import CountResult, TokenCounter


@pytest.fixture
def mock_tiktoken_available():
    with patch("importlib.util.find_spec", return_value=True):
        yield


@pytest.fixture
def mock_tiktoken_unavailable():
    with patch("importlib.util.find_spec", return_value=None):
        yield


@pytest.fixture
def mock_encoder():
    encoder = MagicMock()
    encoder.encode.side_effect = lambda text, **kwargs: [0] * len(text)  # Mock tokenization
    return encoder


def test_token_counter_without_model():
    counter = TokenCounter()
    assert counter.model is None
    assert counter.encoder is None


def test_token_counter_initialization(mock_tiktoken_available, mock_encoder):
    with patch.object(TokenCounter, "_get_encoder", return_value=mock_encoder) as get_encoder:
        counter = TokenCounter(model="gpt-4")

    get_encoder.assert_called_once_with("gpt-4")
    assert counter.encoder is mock_encoder


def test_token_counter_initialization_tiktoken_unavailable(mock_tiktoken_unavailable):
    # This shouldn't raise an error if no model is specified
    counter = TokenCounter()
    assert counter.encoder is None

    with pytest.raises(TokenizerNotAvailableError):
        TokenCounter(model="gpt-4")


def test_count(mock_tiktoken_available, mock_encoder):
    with patch.object(TokenCounter, "_get_encoder", return_value=mock_encoder):
        counter = TokenCounter(model="gpt-4")

    result = counter.count("Hello, world!")

    assert isinstance(result, CountResult)
    assert result.tokens == 13  # Based on our mock returning length of input
    assert result.lines == 0
    assert result.characters == 13
    mock_encoder.encode.assert_called_once_with("Hello, world!", disallowed_special=())


def test_count_without_model():
    result = TokenCounter().count("line one\nline two\n")

    assert result.tokens is None
    assert result.lines == 2
    assert result.characters == 18


def test_unknown_model():
    tiktoken = pytest.importorskip("tiktoken")
    with patch.object(tiktoken, "encoding_for_model", side_effect=KeyError("nope")):
        with pytest.raises(ValueError, match="Could not load tokenizer for model 'nope'"):
            TokenCounter(model="nope")
