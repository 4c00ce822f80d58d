# ABOUTME: ISBN-10 and ISBN-13 normalization and checksum validation.
# ABOUTME: validate_isbn() returns the normalized code or raises InvalidIsbnError.

import re

_NON_ISBN_CHARS = re.compile(r"[^0-9Xx]")


class InvalidIsbnError(Exception):
    """Raised when an ISBN is missing, has the wrong length, or fails its checksum."""


def normalize_isbn(raw: str) -> str:
    """Strip separators from an ISBN without checking it.

    Keeps digits and the check character X (upper-cased); everything else
    (hyphens, spaces, stray punctuation) is dropped.
    """
    return _NON_ISBN_CHARS.sub("", raw).upper()


def _is_valid_isbn10(isbn: str) -> bool:
    total = 0
    for i, char in enumerate(isbn):
        if i == 9 and char == "X":
            value = 10
        elif char.isdigit():
            value = int(char)
        else:
            return False
        total += value * (10 - i)
    return total % 11 == 0


def _is_valid_isbn13(isbn: str) -> bool:
    if not isbn.isdigit():
        return False
    total = sum(int(char) * (1 if i % 2 == 0 else 3) for i, char in enumerate(isbn))
    return total % 10 == 0


def validate_isbn(raw: str | None) -> str:
    """Validate an ISBN-10 or ISBN-13 and return it normalized.

    Hyphens, spaces and other separators are tolerated on input:
    "978-0-306-40615-7" validates and returns "9780306406157".

    Args:
        raw: The ISBN as entered by a user or read from a file.

    Returns:
        The ISBN with only digits and a trailing upper-case X (ISBN-10 only).

    Raises:
        InvalidIsbnError: If the value is empty, is not 10 or 13 characters
            long once normalized, or fails the check-digit rule.
    """
    if raw is None or not raw.strip():
        raise InvalidIsbnError("ISBN not provided.")

    isbn = normalize_isbn(raw)

    if len(isbn) == 10:
        if not _is_valid_isbn10(isbn):
            raise InvalidIsbnError("Invalid ISBN-10.")
    elif len(isbn) == 13:
        if not _is_valid_isbn13(isbn):
            raise InvalidIsbnError("Invalid ISBN-13.")
    else:
        raise InvalidIsbnError("ISBN must contain 10 or 13 digits.")

    return isbn
