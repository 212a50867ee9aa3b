"""Parsing of otpauth:// TOTP keys into an immutable model."""

import logging
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Optional, Tuple
from urllib.parse import quote, unquote, urlencode

from cryptography.hazmat.primitives import hashes

from otpkey.config import Config
from otpkey.exceptions import InvalidOTPAuthKeyError
from otpkey.utils.validators import InputValidator


class TOTPAlgorithm(Enum):
    """Hash algorithms an otpauth key may request."""

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @classmethod
    def from_name(cls, name: str) -> Optional["TOTPAlgorithm"]:
        """Resolve an algorithm name case-insensitively, or None."""
        valid, _ = InputValidator.validate_algorithm(name)
        if not valid:
            return None
        return cls(name.upper())

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """Return the matching hash primitive for code generation."""
        return _HASH_ALGORITHMS[self]()


_HASH_ALGORITHMS = {
    TOTPAlgorithm.SHA1: hashes.SHA1,
    TOTPAlgorithm.SHA256: hashes.SHA256,
    TOTPAlgorithm.SHA512: hashes.SHA512,
}


@dataclass(frozen=True)
class OTPAuthModel:
    """
    TOTP configuration extracted from an otpauth key.

    Instances are only produced for fully valid keys. `uri` keeps the
    original input, so two keys that differ only in encoding are not equal.
    """

    account_name: str
    algorithm: TOTPAlgorithm
    digits: int
    issuer: str
    key_b32: str
    period: int
    uri: str

    @classmethod
    def from_otpauth_key(cls, key: str) -> Optional["OTPAuthModel"]:
        """Parse `key`, returning None when it is not a valid TOTP key."""
        return parse_otpauth_key(key)

    @classmethod
    def create(
        cls,
        account_name: str,
        issuer: str,
        key_b32: str,
        algorithm: TOTPAlgorithm = TOTPAlgorithm.SHA1,
        digits: int = Config.DEFAULT_DIGITS,
        period: int = Config.DEFAULT_PERIOD,
    ) -> Optional["OTPAuthModel"]:
        """
        Compose a canonical otpauth key from its parts and parse it.

        Args:
            account_name: Account shown after the label separator
            issuer: Service name, written to both label and query
            key_b32: Base32 shared secret
            algorithm: Hash algorithm
            digits: Code length
            period: Code lifetime in seconds

        Returns:
            The model for the composed key, or None if the parts cannot
            form a valid key
        """
        # A separator in the issuer would move the label boundary
        if not issuer or ":" in issuer:
            return None

        label = f"{quote(issuer, safe='')}:{quote(account_name, safe='@')}"
        query = urlencode(
            {
                "secret": key_b32,
                "issuer": issuer,
                "algorithm": algorithm.value,
                "digits": digits,
                "period": period,
            },
            quote_via=quote,
        )
        return parse_otpauth_key(f"{Config.OTPAUTH_TOTP_PREFIX}{label}?{query}")

    def to_dict(self) -> dict:
        """Return the fields as plain scalars."""
        data = asdict(self)
        data["algorithm"] = self.algorithm.value
        return data


def _split_label(label: str) -> Tuple[Optional[str], str]:
    """Decode the label, then split it into (issuer, account name)."""
    decoded = unquote(label)
    if ":" not in decoded:
        return None, decoded

    issuer, account_name = decoded.split(":", 1)
    return issuer, account_name


def _parse_query(query: str) -> Dict[str, str]:
    """Parse `key=value&...` pairs, decoding each value. First key wins."""
    params: Dict[str, str] = {}
    for pair in query.split("&"):
        if not pair:
            continue
        name, _, value = pair.partition("=")
        params.setdefault(name.lower(), unquote(value))
    return params


def _reject(reason: str) -> None:
    logging.debug(f"Rejected otpauth key: {reason}")
    return None


def parse_otpauth_key(key: str) -> Optional[OTPAuthModel]:
    """
    Parse an `otpauth://totp/` key.

    Args:
        key: Untrusted text, typically from a QR code or the clipboard

    Returns:
        OTPAuthModel on success, None for any malformed or unsupported key
    """
    if not isinstance(key, str) or not key.startswith(Config.OTPAUTH_TOTP_PREFIX):
        return _reject("not an otpauth://totp/ key")

    remainder = key[len(Config.OTPAUTH_TOTP_PREFIX):]
    label, _, query = remainder.partition("?")

    label_issuer, account_name = _split_label(label)
    if not account_name:
        return _reject("empty account name")

    params = _parse_query(query)

    algorithm = TOTPAlgorithm(Config.DEFAULT_ALGORITHM)
    if "algorithm" in params:
        algorithm = TOTPAlgorithm.from_name(params["algorithm"])
        if algorithm is None:
            return _reject("unsupported algorithm")

    numbers = {"digits": Config.DEFAULT_DIGITS, "period": Config.DEFAULT_PERIOD}
    for field in numbers:
        if field in params:
            valid, msg = InputValidator.validate_positive_int(params[field], field)
            if not valid:
                return _reject(msg)
            numbers[field] = int(params[field])

    if "secret" not in params:
        return _reject("missing secret")

    secret = params["secret"]
    valid, msg = InputValidator.validate_base32_secret(secret)
    if not valid:
        return _reject(msg)

    issuer = label_issuer or params.get("issuer")
    if not issuer:
        return _reject("missing issuer")

    return OTPAuthModel(
        account_name=account_name,
        algorithm=algorithm,
        digits=numbers["digits"],
        issuer=issuer,
        key_b32=secret,
        period=numbers["period"],
        uri=key,
    )


def require_otpauth_key(key: str) -> OTPAuthModel:
    """
    Parse `key` for callers that report failures as exceptions.

    Raises:
        InvalidOTPAuthKeyError: If the key is not a valid TOTP key
    """
    model = parse_otpauth_key(key)
    if model is None:
        raise InvalidOTPAuthKeyError("Invalid authenticator key")
    return model
