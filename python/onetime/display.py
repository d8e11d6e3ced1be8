"""
Helpers for showing codes to people.

Example:
    >>> from onetime.display import format_grouped
    >>> format_grouped("12345678")
    '123 456 78'
"""

import base64
import binascii
import logging
from typing import Optional

from onetime.config import OTPConfig
from onetime.engine import MICROS, Moment, compute_totp, elapsed_micros, to_micros
from onetime.errors import SecretDecodeError

log = logging.getLogger(__name__)

GROUP_SIZE = 3


def format_grouped(code: str) -> str:
    """
    Split a code into space-separated groups of three.

    The last group keeps the remainder: "12345678" -> "123 456 78".
    """
    groups = [code[i : i + GROUP_SIZE] for i in range(0, len(code), GROUP_SIZE)]
    return " ".join(groups)


def format_code(config: OTPConfig, code: int) -> str:
    """Zero-pad a numeric code to the configured length."""
    return str(code).zfill(config.digits)


def time_remaining(config: OTPConfig, now: Optional[Moment] = None) -> int:
    """
    Whole seconds until the current TOTP step ends.

    At the exact step boundary the full step length is returned, never 0.

    Args:
        config: OTP configuration
        now: Query time (default: current time)

    Returns:
        Seconds remaining, 1 .. step
    """
    step = to_micros(config.step)
    remaining = step - elapsed_micros(config, now) % step
    return -(-remaining // MICROS)


def decode_secret(secret_b32: str) -> bytes:
    """
    Decode a base32 secret as shown by authenticator apps.

    Case, spaces and missing '=' padding are tolerated.

    Raises:
        SecretDecodeError: input is not valid base32
    """
    cleaned = "".join(secret_b32.split()).upper()
    # Add padding if needed
    padding = -len(cleaned) % 8
    cleaned += "=" * padding
    try:
        return base64.b32decode(cleaned)
    except (binascii.Error, ValueError) as e:
        log.debug("Rejected base32 secret of length %d", len(secret_b32))
        raise SecretDecodeError(f"Invalid base32 secret: {e}") from e


def decode_and_compute_totp(secret_b32: str, now: Optional[Moment] = None) -> str:
    """
    Authenticator-style code: 6 digits, SHA-1, 30-second steps.

    Args:
        secret_b32: Base32 encoded secret
        now: Query time (default: current time)

    Returns:
        Zero-padded 6-digit code

    Raises:
        SecretDecodeError: secret is not valid base32
    """
    config = OTPConfig.new(6)
    secret = decode_secret(secret_b32)
    return format_code(config, compute_totp(config, secret, now))
