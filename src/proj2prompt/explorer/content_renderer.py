"""Rendering of file contents into prompt text."""

from pathlib import Path

from proj2prompt.types import PathType

from .binary_detector import is_binary

DEFAULT_SAMPLE_SIZE = 8000
HEX_PREVIEW_BYTES = 10


class ContentRenderer:
    """Turns a file into the text that follows its header in the output.

    Only the first ``sample_size`` bytes of a file are ever read. The sample decides how the
    file is rendered:

    - Empty files render as an empty string without being opened.
    - Binary samples render as a one-line summary giving the file name, its total size and
      the first ten bytes in hexadecimal.
    - Text samples render as the sample itself, decoded as UTF-8. Invalid sequences are
      replaced with U+FFFD rather than raising, so decoding never fails.

    Content past the sample is dropped silently unless ``mark_truncated`` is set, in which
    case a closing line states how much of the file was shown.

    Attributes:
        sample_size (int): Maximum number of bytes read from each file.
        mark_truncated (bool): Whether truncated text files get a truncation notice.

    Example:
        >>> import tempfile, os
        >>> with tempfile.NamedTemporaryFile(delete=False) as f:
        ...     _ = f.write(bytes(range(16)))
        >>> summary = ContentRenderer().render(f.name, 16)
        >>> summary.endswith("Size: 16 bytes, First 10 bytes: 00 01 02 03 04 05 06 07 08 09]")
        True
        >>> os.unlink(f.name)
    """

    def __init__(self, sample_size: int = DEFAULT_SAMPLE_SIZE, mark_truncated: bool = False) -> None:
        if sample_size <= 0:
            raise ValueError(f"sample_size must be positive, got {sample_size}")
        self.sample_size = sample_size
        self.mark_truncated = mark_truncated

    def read_sample(self, path: PathType) -> bytes:
        """Read at most ``sample_size`` bytes from the start of a file.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        with open(path, "rb") as file:
            return file.read(self.sample_size)

    def render(self, path: PathType, size: int) -> str:
        """Render a file's content.

        Args:
            path: Path of the file to read.
            size: Size of the file in bytes, as reported by stat.

        Returns:
            The rendered text.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        if size == 0:
            return ""

        sample = self.read_sample(path)

        if is_binary(sample):
            return format_binary_summary(Path(path).name, size, sample)

        text = sample.decode("utf-8", errors="replace")
        if self.mark_truncated and size > len(sample):
            text += f"\n[... truncated: showing first {len(sample)} of {size} bytes]"
        return text


def format_binary_summary(name: str, size: int, sample: bytes) -> str:
    """Describe binary content without reproducing it.

    Example:
        >>> format_binary_summary("logo.png", 2048, b"\\x89PNG\\r\\n\\x1a\\n\\x00\\x00\\x00\\x0d")
        '[Binary file: logo.png, Size: 2048 bytes, First 10 bytes: 89 50 4e 47 0d 0a 1a 0a 00 00]'
    """
    preview = " ".join(f"{byte:02x}" for byte in sample[:HEX_PREVIEW_BYTES])
    return f"[Binary file: {name}, Size: {size} bytes, First {HEX_PREVIEW_BYTES} bytes: {preview}]"
