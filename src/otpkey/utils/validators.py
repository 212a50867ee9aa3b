"""Reusable validation utilities for otpauth key fields."""

import re
from typing import Tuple
from otpkey.config import Config

# RFC 4648 alphabet, with optional trailing padding
_BASE32_PATTERN = re.compile(r"[A-Za-z2-7]+=*")
_DECIMAL_PATTERN = re.compile(r"[0-9]+")


class InputValidator:
    """Centralized validation of the values carried by an otpauth key."""

    @staticmethod
    def validate_base32_secret(secret: str) -> Tuple[bool, str]:
        """Validate a Base32 shared secret (case-insensitive)."""
        if not secret:
            return False, "Secret cannot be empty"

        if not _BASE32_PATTERN.fullmatch(secret):
            return False, "Secret contains characters outside the Base32 alphabet"

        return True, ""

    @staticmethod
    def validate_positive_int(value: str, field: str) -> Tuple[bool, str]:
        """Validate that a query value is a positive decimal integer."""
        if not value or not _DECIMAL_PATTERN.fullmatch(value):
            return False, f"{field} must be a number"

        if len(value) > Config.MAX_INTEGER_PARAM_LENGTH:
            return False, f"{field} is too large"

        if int(value) < 1:
            return False, f"{field} must be positive"

        return True, ""

    @staticmethod
    def validate_algorithm(name: str) -> Tuple[bool, str]:
        """Validate a hash algorithm name."""
        if not name or name.upper() not in Config.SUPPORTED_ALGORITHMS:
            supported = ", ".join(Config.SUPPORTED_ALGORITHMS)
            return False, f"Unsupported algorithm (expected one of {supported})"

        return True, ""
