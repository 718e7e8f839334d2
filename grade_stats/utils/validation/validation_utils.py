"""Consolidated Validation Utilities - Single Source of Truth"""
from typing import Any, Optional

# BSON integers are signed 64-bit
MIN_RECORD_ID = -2 ** 63
MAX_RECORD_ID = 2 ** 63 - 1

class ValidationUtils:
    """Identifier parsing for path parameters"""

    @staticmethod
    def parse_record_id(value: Any) -> Optional[int]:
        """
        Parse a learner/class identifier from a path segment.

        Integer text and integral decimal text ("7", " 7 ", "7.0") are
        accepted. Anything else returns None, which callers treat as an
        identifier that matches no records. Values outside the signed 64-bit
        range cannot be stored, so they match nothing either.
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return ValidationUtils._in_range(value)
        if not isinstance(value, str):
            return None

        text = value.strip()
        if not text:
            return None
        try:
            return ValidationUtils._in_range(int(text))
        except ValueError:
            pass
        try:
            number = float(text)
        except (ValueError, OverflowError):
            return None
        if number != number or number in (float("inf"), float("-inf")) or not number.is_integer():
            return None
        return ValidationUtils._in_range(int(number))

    @staticmethod
    def _in_range(number: int) -> Optional[int]:
        if MIN_RECORD_ID <= number <= MAX_RECORD_ID:
            return number
        return None
