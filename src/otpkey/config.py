import os


class Config:
    """
    Application configuration constants.

    Environment-aware configuration that adapts between development and production.
    Set OTPKEY_ENV=development for verbose logging.
    """

    # ============================================
    # VERSION & ENVIRONMENT
    # ============================================

    VERSION = "1.0.0"
    APP_NAME = "otpkey"

    # Environment detection (defaults to PRODUCTION)
    IS_PRODUCTION = os.getenv("OTPKEY_ENV", "production") == "production"

    # ============================================
    # OTPAUTH KEY FORMAT
    # ============================================

    OTPAUTH_TOTP_PREFIX = "otpauth://totp/"

    # Values used when the key omits the parameter
    DEFAULT_ALGORITHM = "SHA1"
    DEFAULT_DIGITS = 6
    DEFAULT_PERIOD = 30  # seconds

    SUPPORTED_ALGORITHMS = ("SHA1", "SHA256", "SHA512")

    # Longest accepted digits/period value, in characters
    MAX_INTEGER_PARAM_LENGTH = 10

    # ============================================
    # LOGGING
    # ============================================

    STORAGE_DIR_NAME = ".otpkey"
    LOG_FILE = "otpkey_activity.log"
    LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # ============================================
    # USER INTERFACE SETTINGS
    # ============================================

    TERMINAL_MAX_WIDTH = 120  # Maximum terminal width for UI
    SECRET_MASK_CHAR = "*"
    SECRET_VISIBLE_CHARS = 4  # Trailing characters shown when masked

    # ============================================
    # METHODS
    # ============================================

    @classmethod
    def get_environment(cls) -> str:
        """
        Get current environment name.

        Returns:
            'production' or 'development'
        """
        return "production" if cls.IS_PRODUCTION else "development"

    @classmethod
    def get_defaults_info(cls) -> dict:
        """
        Get the otpauth parameter defaults for display/logging.

        Returns:
            Dictionary with default algorithm, digits and period
        """
        return {
            "algorithm": cls.DEFAULT_ALGORITHM,
            "digits": cls.DEFAULT_DIGITS,
            "period": cls.DEFAULT_PERIOD,
            "environment": cls.get_environment(),
        }


def get_storage_directory():
    """Ensures and returns the application's storage directory path."""
    storage_dir = os.path.join(os.path.expanduser("~"), Config.STORAGE_DIR_NAME)
    os.makedirs(storage_dir, exist_ok=True)
    return storage_dir


# ============================================
# VALIDATION
# ============================================


def validate_config():
    """
    Validate that the configured defaults describe a usable TOTP key.

    Raises:
        ValueError: If configuration is inconsistent
    """
    errors = []

    if Config.DEFAULT_ALGORITHM not in Config.SUPPORTED_ALGORITHMS:
        errors.append(
            f"Default algorithm {Config.DEFAULT_ALGORITHM!r} is not supported"
        )

    if Config.DEFAULT_DIGITS < 1:
        errors.append("Default digits must be >= 1")

    if Config.DEFAULT_PERIOD < 1:
        errors.append("Default period must be >= 1 second")

    if not Config.OTPAUTH_TOTP_PREFIX.endswith("/"):
        errors.append("otpauth prefix must end with the path separator")

    if errors:
        raise ValueError(
            f"Configuration validation failed:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


# Run validation on import
try:
    validate_config()
except ValueError as e:
    import logging

    logging.warning(f"Configuration validation warning: {e}")
