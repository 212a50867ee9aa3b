"""Custom exceptions for application."""

import logging


class CoreException(Exception):
    """Base exception that logs errors."""

    def __init__(self, message: str):
        self.message = message
        logging.error(f"{self.__class__.__name__}: {message}")
        super().__init__(self.message)


class InvalidOTPAuthKeyError(CoreException):
    """Key could not be parsed into an otpauth model."""

    pass
