#!/usr/bin/env python3
"""
Data models for rwkit.
Defines the result types shared by the formatters.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FormatResult:
    """
    Outcome of formatting a value as JSON or XML.

    Attributes:
        text: The formatted document (empty on failure)
        error: The exception that stopped formatting, if any
    """
    text: str = ""
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """Error description, or an empty string on success."""
        if self.error is None:
            return ""
        return str(self.error)

    def __str__(self) -> str:
        return self.text if self.ok else self.message

    @classmethod
    def success(cls, text: str) -> "FormatResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: Exception) -> "FormatResult":
        return cls(error=error)
