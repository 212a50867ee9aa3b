"""Reusable formatting utilities."""

import json
from otpkey.config import Config


class UIFormatter:
    """Centralized formatting of parsed keys."""

    @staticmethod
    def mask_secret(secret: str) -> str:
        """Hide all but the last few characters of a secret."""
        visible = Config.SECRET_VISIBLE_CHARS
        if len(secret) <= visible:
            return Config.SECRET_MASK_CHAR * len(secret)
        return Config.SECRET_MASK_CHAR * (len(secret) - visible) + secret[-visible:]

    @staticmethod
    def format_json(data: dict) -> str:
        """Render a dict as stable, indented JSON."""
        return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)
