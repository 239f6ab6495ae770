"""Delivery of the generated text to its destinations.

Failures are reported as DisposalError so the user can tell that the output was
generated but did not reach its destination.
"""

from pathlib import Path

import pyperclip

from proj2prompt.exceptions import DisposalError
from proj2prompt.types import PathType


def write_to_file(text: str, path: PathType) -> None:
    """Write the text to a file, replacing any existing content.

    Raises:
        DisposalError: If the file cannot be written.
    """
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as e:
        raise DisposalError("file", f"Error writing to file: {e}") from e


def copy_to_clipboard(text: str) -> None:
    """Place the text on the system clipboard.

    Raises:
        DisposalError: If no clipboard mechanism is available or copying fails.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise DisposalError("clipboard", f"Error copying to clipboard: {e}") from e
