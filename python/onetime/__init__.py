"""
onetime - HOTP/TOTP One-Time Passwords

Counter-based (RFC 4226) and time-based (RFC 6238) passcodes from a shared
secret. Compatible with Google Authenticator, Authy and similar apps.

Usage:
    from onetime import OTPConfig, compute_hotp, compute_totp

    config = OTPConfig.new(6)
    code = compute_totp(config, b"shared secret")

    # Authenticator-style code from a base32 secret
    from onetime import decode_and_compute_totp
    decode_and_compute_totp("JBSWY3DPEHPK3PXP")  # '123456'
"""

__version__ = "0.1.0"
__license__ = "CC0-1.0"

from onetime.errors import OTPError, InvalidDigitCount, SecretDecodeError
from onetime.hashes import HashAlgorithm, MacAlgorithm, SHA1, SHA256, SHA512
from onetime.config import OTPConfig
from onetime.engine import compute_hotp, compute_totp, time_step, truncate
from onetime.display import (
    decode_and_compute_totp,
    decode_secret,
    format_code,
    format_grouped,
    time_remaining,
)

__all__ = [
    # Errors
    "OTPError",
    "InvalidDigitCount",
    "SecretDecodeError",
    # Configuration
    "OTPConfig",
    "HashAlgorithm",
    "MacAlgorithm",
    "SHA1",
    "SHA256",
    "SHA512",
    # Code generation
    "compute_hotp",
    "compute_totp",
    "time_step",
    "truncate",
    # Display
    "decode_and_compute_totp",
    "decode_secret",
    "format_code",
    "format_grouped",
    "time_remaining",
]
