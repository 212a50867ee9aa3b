"""Command handlers for the otpkey CLI."""

import logging
import sys

from otpkey.core.otpauth import (
    OTPAuthModel,
    TOTPAlgorithm,
    parse_otpauth_key,
    require_otpauth_key,
)
from otpkey.exceptions import CoreException
from otpkey.ui import views
from otpkey.utils.validators import InputValidator


def read_key(args) -> str:
    """
    Return the key given on the command line, or one line from stdin.

    Only the line terminator is removed; the key is otherwise kept as typed.
    """
    key = getattr(args, "key", None)
    if key is None or key == "-":
        key = sys.stdin.readline().rstrip("\r\n")
    return key


# ============================================
# COMMAND HANDLERS
# ============================================


def parse_command(args) -> int:
    """
    Parse a key and display its fields.

    Args:
        args: Command line arguments (key, json, show_secret)

    Returns:
        Process exit status
    """
    try:
        model = require_otpauth_key(read_key(args))
    except CoreException:
        views.show_error("Invalid authenticator key.")
        return 1

    logging.info(f"Parsed key for issuer '{model.issuer}'")

    if args.json:
        views.display_otpauth_json(model, show_secret=args.show_secret)
    else:
        views.display_otpauth_details(model, show_secret=args.show_secret)
    return 0


def check_command(args) -> int:
    """
    Report whether a key is a valid TOTP key.

    Args:
        args: Command line arguments (key)

    Returns:
        0 if the key is valid, 1 otherwise
    """
    if parse_otpauth_key(read_key(args)) is None:
        views.show_error("Invalid authenticator key.")
        return 1

    views.show_success("Valid authenticator key.")
    return 0


def build_command(args) -> int:
    """
    Compose a canonical otpauth key from its parts.

    Args:
        args: Command line arguments (issuer, account, secret, algorithm,
            digits, period)

    Returns:
        Process exit status
    """
    valid, msg = InputValidator.validate_base32_secret(args.secret)
    if not valid:
        views.show_warning(msg)
        return 1

    for field in ("digits", "period"):
        valid, msg = InputValidator.validate_positive_int(
            str(getattr(args, field)), field
        )
        if not valid:
            views.show_warning(msg)
            return 1

    algorithm = TOTPAlgorithm.from_name(args.algorithm)
    if algorithm is None:
        _, msg = InputValidator.validate_algorithm(args.algorithm)
        views.show_warning(msg)
        return 1

    model = OTPAuthModel.create(
        account_name=args.account,
        issuer=args.issuer,
        key_b32=args.secret,
        algorithm=algorithm,
        digits=args.digits,
        period=args.period,
    )
    if model is None:
        views.show_error("Issuer and account cannot form a valid key.")
        return 1

    logging.info(f"Built key for issuer '{model.issuer}'")
    views.display_uri(model.uri)
    return 0
