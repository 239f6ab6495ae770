"""Counter for tokens, lines, and characters in prompt text.

Token counting uses OpenAI's tiktoken library, which is an optional dependency. Without
it (or without a model name) the counter still reports lines and characters and returns
None for tokens.
"""

import importlib.util
from collections import namedtuple
from typing import Any, Optional

from proj2prompt.exceptions import TokenizerNotAvailableError

CountResult = namedtuple("CountResult", ["lines", "tokens", "characters"])


def check_tiktoken_available() -> bool:
    """Check if the tiktoken library is available.

    Returns:
        True if tiktoken is installed, False otherwise.
    """
    return importlib.util.find_spec("tiktoken") is not None


class TokenCounter:
    """Counter for tokens, lines, and characters in prompt text.

    Attributes:
        model (Optional[str]): Name of the model whose tokenizer to use, or None if token
            counting is disabled.
        encoder (Optional[Any]): The tiktoken encoder, or None when token counting is off.

    Example:
        >>> counter = TokenCounter()
        >>> result = counter.count("Hello\\nworld!")
        >>> result.lines, result.characters
        (1, 12)
        >>> print(result.tokens)
        None

    Raises:
        TokenizerNotAvailableError: If a model is given but tiktoken is not installed.
        ValueError: If tiktoken does not know the model.
    """

    def __init__(self, model: Optional[str] = None):
        self.model = model
        self.encoder: Optional[Any] = None

        if self.model is not None:
            if not check_tiktoken_available():
                raise TokenizerNotAvailableError()
            self.encoder = self._get_encoder(self.model)

    @staticmethod
    def _get_encoder(model: str) -> Any:
        import tiktoken

        try:
            return tiktoken.encoding_for_model(model)
        except KeyError:
            raise ValueError(
                f"Could not load tokenizer for model '{model}'. Consider using a "
                "well-supported model like 'gpt-4' (cl100k_base encoding) for an approximate count."
            )

    def count(self, text: str) -> CountResult:
        """Count lines, tokens, and characters in text.

        Args:
            text: The text to analyze.

        Returns:
            CountResult: Named tuple of newline count, token count (None if token counting
                is disabled) and character count.
        """
        tokens = None
        if self.encoder is not None:
            tokens = len(self.encoder.encode(text, disallowed_special=()))
        return CountResult(lines=text.count("\n"), tokens=tokens, characters=len(text))
