"""Handles all user-facing output and display formatting."""

import shutil
from otpkey.ui.colors import Colors
from otpkey.config import Config
from otpkey.core.otpauth import OTPAuthModel
from otpkey.utils.formatters import UIFormatter


# ============================================
# TERMINAL UTILITIES
# ============================================


def get_terminal_width() -> int:
    """
    Get the current terminal width with bounds.

    Returns:
        Terminal width (60-120 chars)
    """
    try:
        width = shutil.get_terminal_size().columns
        return max(60, min(width, Config.TERMINAL_MAX_WIDTH))
    except (OSError, ValueError):
        return 80


# ============================================
# STATUS MESSAGES
# ============================================


def show_success(message: str):
    """Display success message with icon."""
    print(f"\n{Colors.SUCCESS}✓ {message}{Colors.RESET}")


def show_error(message: str):
    """Display error message with icon."""
    print(f"\n{Colors.ERROR}✗ {message}{Colors.RESET}")


def show_warning(message: str):
    """Display warning message with icon."""
    print(f"\n{Colors.WARNING}⚠ {message}{Colors.RESET}")


# ============================================
# KEY DISPLAYS
# ============================================


def display_otpauth_details(model: OTPAuthModel, show_secret: bool = False):
    """
    Display a parsed key in a formatted box.

    Args:
        model: Parsed otpauth model
        show_secret: Print the Base32 secret in clear text
    """
    box_width = min(get_terminal_width() - 4, 70)

    print(f"\n{Colors.PRIMARY}╭{'─' * box_width}╮")

    header = "Authenticator Key"
    header_padding = box_width - len(header) - 2
    print(
        f"│ {Colors.HEADER}{header}{Colors.PRIMARY}"
        f"{' ' * header_padding}│{Colors.RESET}"
    )
    print(f"{Colors.PRIMARY}├{'─' * box_width}┤{Colors.RESET}")

    def print_field(label: str, value: str, value_color: str):
        max_value_len = box_width - len(label) - 4
        if len(value) > max_value_len:
            value_display = value[: max_value_len - 3] + "..."
        else:
            value_display = value

        padding = box_width - len(label) - len(value_display) - 2
        print(
            f"{Colors.PRIMARY}│ {Colors.LABEL}{label} {Colors.RESET}"
            f"{value_color}{value_display}{Colors.RESET}"
            f"{' ' * padding}{Colors.PRIMARY}│{Colors.RESET}"
        )

    secret = model.key_b32 if show_secret else UIFormatter.mask_secret(model.key_b32)

    print_field("Issuer:   ", model.issuer, Colors.ISSUER)
    print_field("Account:  ", model.account_name, Colors.ACCOUNT)
    print_field("Secret:   ", secret, Colors.SECRET)
    print_field("Algorithm:", model.algorithm.value, Colors.VALUE)
    print_field("Digits:   ", str(model.digits), Colors.VALUE)
    print_field("Period:   ", f"{model.period}s", Colors.VALUE)

    print(f"{Colors.PRIMARY}╰{'─' * box_width}╯{Colors.RESET}\n")


def display_otpauth_json(model: OTPAuthModel, show_secret: bool = False):
    """Print the model as JSON, masking the secret unless requested."""
    data = model.to_dict()
    if not show_secret:
        data["key_b32"] = UIFormatter.mask_secret(model.key_b32)
        # The original key embeds the secret too
        data.pop("uri")
    print(UIFormatter.format_json(data))


def display_uri(uri: str):
    """Print a composed key on its own line for copy/paste."""
    print(uri)
