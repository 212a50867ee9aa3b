"""ANSI color codes with semantic meanings."""

import platform
import os

# Initialize color support for Windows terminals
if platform.system() == "Windows":
    os.system("")  # Enables ANSI escape sequences in Windows 10/11 terminals


class Colors:
    """ANSI color codes with semantic naming."""

    RESET = "\033[0m"

    BRIGHT_YELLOW = "\033[93m"

    # ========== SEMANTIC COLORS - USE THESE FOR CONSISTENCY ==========

    PRIMARY = "\033[96m"  # Bright Cyan - Main brand/interactive

    # Status Colors
    SUCCESS = "\033[92m"  # Bright Green - Success, completion
    ERROR = "\033[91m"  # Bright Red - Errors, failures
    WARNING = "\033[93m"  # Bright Yellow - Warnings, cautions

    HEADER = "\033[1m\033[96m"  # Bold Cyan - Section headers

    # Data Display Colors
    LABEL = "\033[96m"  # Bright Cyan - Field labels
    VALUE = "\033[97m"  # Bright White - Field values
    SECRET = "\033[92m"  # Bright Green - Secrets (when shown)
    ISSUER = "\033[96m"  # Bright Cyan - Issuer names
    ACCOUNT = "\033[94m"  # Bright Blue - Account names
