"""Binary content detection based on a byte sample."""

# Proportion of non-text bytes above which a sample is considered binary
NON_TEXT_THRESHOLD = 0.3

# Null, C0 control characters other than \t \n \v \f \r, and DEL
NON_TEXT_BYTES = frozenset([0, *range(1, 9), *range(14, 32), 127])


def count_non_text_bytes(sample: bytes) -> int:
    """Count the bytes in a sample that do not occur in ordinary text.

    Example:
        >>> count_non_text_bytes(b"line\\tone\\r\\n")
        0
        >>> count_non_text_bytes(b"\\x00\\x01\\x7fabc")
        3
    """
    return sum(1 for byte in sample if byte in NON_TEXT_BYTES)


def is_binary(sample: bytes) -> bool:
    """Classify a byte sample as binary or text.

    The sample is binary when more than 30% of its bytes are null bytes, control characters
    other than common whitespace, or DEL. The decision is based on content only, never on
    the file name, so the same bytes always classify the same way. An empty sample is text.

    Args:
        sample: Leading bytes of a file.

    Returns:
        True if the sample looks binary, False if it looks like text.

    Example:
        >>> is_binary(b"Hello, world!\\n")
        False
        >>> is_binary(bytes(range(10)))
        True
        >>> is_binary(b"")
        False
    """
    if not sample:
        return False
    return count_non_text_bytes(sample) / len(sample) > NON_TEXT_THRESHOLD
