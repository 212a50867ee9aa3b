"""Initializes and configures the argparse parser for the CLI."""

import argparse
import sys
from otpkey.ui import commands, colors
from otpkey.config import Config


class CustomHelpFormatter(argparse.HelpFormatter):
    """Custom formatter that colorizes help text."""

    def format_help(self):
        """Add color to usage line."""
        help_text = super().format_help()
        return help_text.replace(
            "usage:", f"{colors.Colors.BRIGHT_YELLOW}Usage:{colors.Colors.RESET}"
        )


class CustomParser(argparse.ArgumentParser):
    """Custom parser that shows help on error instead of just error message."""

    def error(self, message):
        """Show help message when command parsing fails."""
        sys.stderr.write(
            f"{colors.Colors.ERROR}Error: {message}{colors.Colors.RESET}\n\n"
        )
        self.print_help(sys.stderr)
        sys.exit(2)


def initialize_parser():
    """
    Build and return the argparse parser with all commands.

    Available commands:
    - parse: Display the fields of a key
    - check: Validate a key
    - build: Compose a key from its parts

    Returns:
        Configured ArgumentParser instance
    """
    parser = CustomParser(
        prog="otpkey",
        description=f"{Config.APP_NAME} v{Config.VERSION} - Inspect otpauth:// TOTP keys",
        formatter_class=CustomHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h", "--help", action="help", help="Show this help message and exit"
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{Config.APP_NAME} v{Config.VERSION}",
        help="Show version information and exit",
    )

    subparsers = parser.add_subparsers(
        title="Available Commands", metavar="<command>", dest="command"
    )
    subparsers.required = True

    # ========================================
    # PARSE COMMAND
    # ========================================
    parse = subparsers.add_parser(
        "parse",
        aliases=["p"],
        help="Display the fields of a key",
        description="Parse an otpauth:// key and display its fields",
        formatter_class=CustomHelpFormatter,
    )
    parse.add_argument("key", nargs="?", help="otpauth:// key ('-' reads stdin)")
    parse.add_argument("--json", action="store_true", help="Print fields as JSON")
    parse.add_argument(
        "--show-secret", action="store_true", help="Show the secret unmasked"
    )
    parse.set_defaults(func=commands.parse_command)

    # ========================================
    # CHECK COMMAND
    # ========================================
    check = subparsers.add_parser(
        "check",
        aliases=["c"],
        help="Validate a key",
        description="Exit with status 0 if the key is a valid TOTP key",
        formatter_class=CustomHelpFormatter,
    )
    check.add_argument("key", nargs="?", help="otpauth:// key ('-' reads stdin)")
    check.set_defaults(func=commands.check_command)

    # ========================================
    # BUILD COMMAND
    # ========================================
    build = subparsers.add_parser(
        "build",
        aliases=["b"],
        help="Compose a key from its parts",
        description="Compose a canonical otpauth://totp/ key",
        formatter_class=CustomHelpFormatter,
    )
    build.add_argument("--issuer", required=True, help="Service name")
    build.add_argument("--account", required=True, help="Account name or email")
    build.add_argument("--secret", required=True, help="Base32 shared secret")
    build.add_argument(
        "--algorithm",
        default=Config.DEFAULT_ALGORITHM,
        help=f"Hash algorithm (default: {Config.DEFAULT_ALGORITHM})",
    )
    build.add_argument(
        "--digits",
        type=int,
        default=Config.DEFAULT_DIGITS,
        help=f"Code length (default: {Config.DEFAULT_DIGITS})",
    )
    build.add_argument(
        "--period",
        type=int,
        default=Config.DEFAULT_PERIOD,
        help=f"Code lifetime in seconds (default: {Config.DEFAULT_PERIOD})",
    )
    build.set_defaults(func=commands.build_command)

    return parser
