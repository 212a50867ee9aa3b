import os
import pytest
from otpkey.ui.cli import start_application
from otpkey.ui.parser import initialize_parser

VALID_KEY = "otpauth://totp/Example:user@bitwarden.com?secret=JBSWY3DPEHPK3PXP"


class TestParser:
    """Test argument parsing."""

    def test_parse_defaults(self):
        """Parse command defaults to masked, boxed output."""
        args = initialize_parser().parse_args(["parse", VALID_KEY])
        assert args.key == VALID_KEY
        assert args.json == False
        assert args.show_secret == False

    def test_build_defaults(self):
        """Build command uses the configured defaults."""
        args = initialize_parser().parse_args(
            ["build", "--issuer", "X", "--account", "y", "--secret", "JBSWY3DP"]
        )
        assert args.algorithm == "SHA1"
        assert args.digits == 6
        assert args.period == 30

    def test_missing_command_exits(self):
        """No command is a usage error."""
        with pytest.raises(SystemExit) as exc:
            initialize_parser().parse_args([])
        assert exc.value.code == 2

    def test_version(self, capsys):
        """--version prints the version and exits."""
        with pytest.raises(SystemExit) as exc:
            initialize_parser().parse_args(["--version"])
        assert exc.value.code == 0
        assert "otpkey v" in capsys.readouterr().out


class TestStartApplication:
    """Test the application entry point."""

    def test_check_valid_key(self, clean_storage, capsys):
        """A valid key exits with status 0."""
        assert start_application(["check", VALID_KEY]) == 0
        assert "Valid" in capsys.readouterr().out

    def test_check_invalid_key(self, clean_storage):
        """An invalid key exits with status 1."""
        assert start_application(["check", "steam://JBSWY3DPEHPK3PXP"]) == 1

    def test_parse_key(self, clean_storage, capsys):
        """Parse prints the decoded fields."""
        assert start_application(["parse", VALID_KEY]) == 0
        out = capsys.readouterr().out
        assert "Example" in out
        assert "user@bitwarden.com" in out
        assert "JBSWY3DPEHPK3PXP" not in out

    def test_unexpected_error_reported(self, clean_storage, monkeypatch):
        """Unexpected errors are reported instead of raised."""

        def boom(args):
            raise RuntimeError("boom")

        monkeypatch.setattr("otpkey.ui.commands.check_command", boom)
        # Parser binds handlers at build time
        assert start_application(["check", VALID_KEY]) == 1

    def test_log_directory_used(self, clean_storage):
        """The storage directory exists for the log file."""
        start_application(["check", VALID_KEY])
        assert os.path.isdir(clean_storage)
