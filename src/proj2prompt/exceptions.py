class IgnoreFileError(Exception):
    """
    Exception raised when an ignore file exists but cannot be read or compiled.

    This is a configuration problem rather than a traversal failure. Callers that load the
    ignore file at the root of a traversal catch it, log a warning, and continue without the
    ignore rules.

    Attributes:
        file_path (str): Path to the ignore file that could not be loaded.
        reason (str): Human-readable description of what went wrong.

    Example:
        >>> error = IgnoreFileError("/project/.gitignore", "invalid start byte")
        >>> str(error)
        'failed to compile /project/.gitignore: invalid start byte'
    """

    def __init__(self, file_path: str, reason: str) -> None:
        """
        Initialize the exception with the ignore file path and the failure reason.

        Args:
            file_path (str): Path to the ignore file.
            reason (str): Why the file could not be loaded.
        """
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"failed to compile {file_path}: {reason}")


class TraversalError(Exception):
    """
    Exception raised when the directory walk cannot continue.

    Permission problems, broken symbolic links and I/O failures encountered while listing,
    inspecting or reading entries are all reported through this exception. No partial output
    accompanies it. The underlying OSError is chained as ``__cause__``.

    Attributes:
        path (str): Path of the entry that could not be processed.

    Example:
        >>> error = TraversalError("/project/secret", "Permission denied")
        >>> str(error)
        '/project/secret: Permission denied'
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class DisposalError(Exception):
    """
    Exception raised when the output was produced but could not be delivered.

    Attributes:
        channel (str): The delivery channel that failed ("file" or "clipboard").

    Example:
        >>> error = DisposalError("clipboard", "no clipboard mechanism available")
        >>> error.channel
        'clipboard'
    """

    def __init__(self, channel: str, message: str) -> None:
        self.channel = channel
        super().__init__(message)


class TokenizerNotAvailableError(Exception):
    """
    Exception raised when token counting is requested without the required tokenizer package.

    The tiktoken package is an optional dependency that must be explicitly installed using the
    'token_counting' extra.

    Example:
        >>> error = TokenizerNotAvailableError()
        >>> str(error).startswith('Tokenizer (tiktoken) is not installed')
        True
    """

    def __init__(self, message: str = "Tokenizer (tiktoken) is not installed.") -> None:
        self.message = (
            f"{message} To enable token counting, install proj2prompt with the 'token_counting' "
            "extra: 'pip install proj2prompt[token_counting]'."
        )
        super().__init__(self.message)
