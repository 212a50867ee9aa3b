import logging
import os
from typing import Optional, Sequence

from otpkey.config import Config, get_storage_directory
from otpkey.ui import colors, parser, views


def setup_logging():
    """
    Configure logging to file within application storage directory.

    Creates log file in ~/.otpkey/otpkey_activity.log with timestamps.
    """
    log_file_path = os.path.join(get_storage_directory(), Config.LOG_FILE)

    logging.basicConfig(
        filename=log_file_path,
        level=logging.INFO if Config.IS_PRODUCTION else logging.DEBUG,
        format=Config.LOG_FORMAT,
        datefmt=Config.LOG_DATE_FORMAT,
    )


def start_application(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main application entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    try:
        setup_logging()
        logging.info(f"Application starting ({Config.get_environment()})")
        logging.debug(f"otpauth defaults: {Config.get_defaults_info()}")

        args = parser.initialize_parser().parse_args(argv)
        return args.func(args)

    except KeyboardInterrupt:
        print(f"\n\n{colors.Colors.WARNING}Interrupted by user.{colors.Colors.RESET}")
        logging.info("Session interrupted by user (Ctrl+C)")
        return 130

    except Exception as e:
        views.show_error(f"A critical error occurred: {e}")
        logging.exception("Critical error in main execution")
        return 1

    finally:
        logging.info("Application shutdown")


if __name__ == "__main__":
    raise SystemExit(start_application())
