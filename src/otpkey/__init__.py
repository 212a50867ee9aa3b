"""otpkey - parse and inspect otpauth:// TOTP keys."""

from otpkey.core.otpauth import (
    OTPAuthModel,
    TOTPAlgorithm,
    parse_otpauth_key,
    require_otpauth_key,
)

__version__ = "1.0.0"

__all__ = [
    "OTPAuthModel",
    "TOTPAlgorithm",
    "parse_otpauth_key",
    "require_otpauth_key",
]
