# errors.py
"""
Custom exceptions used across currency-table modules.
"""
from typing import Optional


class CurrencyParseError(RuntimeError):
    """Raised when a currency definition line lacks one of its fields."""

    def __init__(self, field: str, line: str, lineno: Optional[int] = None) -> None:
        self.field = field
        self.line = line
        self.lineno = lineno
        where = f"Line {lineno}: " if lineno is not None else ""
        super().__init__(f"{where}missing '{field}' field: {line.strip()}")
