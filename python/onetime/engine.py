"""
HOTP (RFC 4226) and TOTP (RFC 6238) code generation.

Every function here is pure apart from reading the clock when ``now`` is
omitted.

Example:
    >>> from onetime import OTPConfig, compute_hotp, compute_totp
    >>> config = OTPConfig.new(6)
    >>> compute_hotp(config, b"12345678901234567890", 1)
    287082
    >>> compute_totp(OTPConfig.new(8), b"12345678901234567890", now=59)
    94287082
"""

import logging
import math
import struct
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from onetime.config import UNIX_EPOCH, OTPConfig, as_utc

log = logging.getLogger(__name__)

Moment = Union[datetime, int, float]

COUNTER_SPACE = 1 << 64
MICROS = 10**6


def to_micros(delta: timedelta) -> int:
    """Exact length of a timedelta in microseconds."""
    return (delta.days * 86400 + delta.seconds) * MICROS + delta.microseconds


def elapsed_micros(config: OTPConfig, now: Optional[Moment] = None) -> int:
    """
    Microseconds from the configured base time to a query time.

    Unix timestamps are handled arithmetically, so any finite value works,
    including ones past the year 9999.

    Args:
        config: OTP configuration
        now: datetime (naive means UTC), Unix timestamp, or None for the
            current time

    Returns:
        Elapsed microseconds, negative before base time

    Raises:
        ValueError: timestamp is infinite or NaN
    """
    if now is None:
        now = datetime.now(timezone.utc)
    if isinstance(now, datetime):
        return to_micros(as_utc(now) - config.base_time)
    if isinstance(now, float):
        if not math.isfinite(now):
            raise ValueError(f"Timestamp must be finite, got {now}")
        now_micros = round(now * MICROS)
    else:
        now_micros = now * MICROS
    return now_micros - to_micros(config.base_time - UNIX_EPOCH)


def truncate(digest: bytes) -> int:
    """
    Dynamic truncation (RFC 4226 section 5.3).

    Args:
        digest: HMAC output, at least 19 bytes

    Returns:
        31-bit integer taken from the digest
    """
    offset = digest[-1] & 0x0F
    return struct.unpack(">I", digest[offset : offset + 4])[0] & 0x7FFFFFFF


def compute_hotp(config: OTPConfig, secret: bytes, counter: int) -> int:
    """
    HOTP code for a secret and counter.

    The result is a number below 10 ** digits and may print with fewer
    digits; pad with ``format_code`` for display.

    Args:
        config: OTP configuration
        secret: Shared secret bytes
        counter: 64-bit unsigned counter

    Returns:
        Numeric code

    Raises:
        ValueError: counter outside 0 .. 2**64 - 1
    """
    if not 0 <= counter < COUNTER_SPACE:
        raise ValueError(f"Counter must fit in 64 unsigned bits, got {counter}")

    # Counter as 8-byte big-endian
    digest = config.hash_algorithm.mac(secret, struct.pack(">Q", counter))
    return truncate(digest) % config.modulus


def time_step(config: OTPConfig, now: Optional[Moment] = None) -> int:
    """
    TOTP counter for a point in time.

    floor((now - base_time) / step). Times before base_time wrap around
    the 64-bit counter space, so one step before base time is 2**64 - 1.
    """
    step = to_micros(config.step)
    return (elapsed_micros(config, now) // step) % COUNTER_SPACE


def compute_totp(
    config: OTPConfig,
    secret: bytes,
    now: Optional[Moment] = None,
) -> int:
    """
    TOTP code for a secret at a point in time.

    Args:
        config: OTP configuration
        secret: Shared secret bytes
        now: Query time (default: current time)

    Returns:
        Numeric code
    """
    counter = time_step(config, now)
    log.debug("TOTP counter %d (step %s)", counter, config.step)
    return compute_hotp(config, secret, counter)
