"""
Formatting utility functions
"""

from typing import Optional


def format_year(year: Optional[int]) -> str:
    """
    Format a year from the collection

    Args:
        year: Year as an integer, negative for BCE

    Returns:
        Display string, empty if unknown
    """
    if year is None:
        return ""
    if year < 0:
        return f"{-year} BCE"
    return str(year)


def single_line(text: Optional[str]) -> str:
    """Collapse newlines and runs of whitespace so a value fits one table row."""
    if not text:
        return ""
    return " ".join(text.split())


def truncate_text(text: Optional[str], max_length: int = 50, ellipsis: str = "...") -> str:
    """
    Truncate text to a maximum length

    Args:
        text: Text to truncate
        max_length: Maximum length
        ellipsis: Ellipsis string to append

    Returns:
        Truncated text
    """
    if not text:
        return ""

    if len(text) <= max_length:
        return text

    return text[:max_length-len(ellipsis)] + ellipsis


def format_cell(text: Optional[str], max_length: int = 40, placeholder: str = "N/A") -> str:
    value = truncate_text(single_line(text), max_length)
    return value or placeholder
