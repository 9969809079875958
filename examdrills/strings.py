"""String exercises: reversal, character sorting and de-duplication."""

from __future__ import annotations


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def sorted_unique_chars(text: str) -> str:
    """Return the distinct characters of ``text`` in code order, spaces removed."""
    return "".join(sorted(set(text) - {" "}))


def merged_unique_chars(first: str, second: str) -> str:
    """Return the distinct characters of both strings in code order."""
    return "".join(sorted(set(first) | set(second)))


def reverse_output(text: str) -> None:
    """Write ``text`` reversed to standard output, without a newline."""
    print(text[::-1], end="")


def strlong(string: str) -> int:
    """Return the length of ``string`` up to its first NUL character."""
    return len(string.partition("\0")[0])


def unique(string: str) -> str:
    """Return ``string`` keeping only the first occurrence of each character."""
    return "".join(dict.fromkeys(string))