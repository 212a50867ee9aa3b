"""Application entry point."""

from otpkey.ui.cli import start_application


def main():
    """Initializes and runs the application."""
    return start_application()


if __name__ == "__main__":
    raise SystemExit(main())
