"""Conversion between spreadsheet column letters and 1-based indices.

Columns use bijective base-26: ``A`` is 1, ``Z`` is 26 and ``AA`` is 27.
There is no zero digit.
"""

from sheet_record_extraction.utils.exceptions import InvalidColumnError

_ALPHABET_SIZE = 26


def column_index_to_letters(index: int) -> str:
    """Encode a 1-based column index as uppercase letters.

    Args:
        index: Column index, 1 or greater.

    Returns:
        Column letters, e.g. ``"AB"`` for 28.

    Raises:
        InvalidColumnError: If the index is not a positive integer.
    """
    if isinstance(index, bool) or not isinstance(index, int) or index < 1:
        raise InvalidColumnError(
            index, message=f"Column index must be a positive integer, got {index!r}"
        )

    letters: list[str] = []
    remaining = index
    while remaining > 0:
        remaining, offset = divmod(remaining - 1, _ALPHABET_SIZE)
        letters.append(chr(ord("A") + offset))
    return "".join(reversed(letters))


def column_letters_to_index(letters: str) -> int:
    """Decode column letters (case-insensitive) into a 1-based index.

    Args:
        letters: Column letters such as ``"b"`` or ``"AA"``.

    Returns:
        The column index.

    Raises:
        InvalidColumnError: If ``letters`` is empty or contains anything
            other than A-Z.
    """
    if not letters:
        raise InvalidColumnError(letters, message="Column letters must not be empty")

    total = 0
    for char in letters.upper():
        if not "A" <= char <= "Z":
            raise InvalidColumnError(
                letters,
                message=f"Invalid character {char!r} in column letters {letters!r}",
            )
        total = total * _ALPHABET_SIZE + (ord(char) - ord("A") + 1)
    return total
