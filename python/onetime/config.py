"""
OTP configuration.

Example:
    >>> from onetime.config import OTPConfig
    >>> config = OTPConfig.new(8)
    >>> config.step.total_seconds()
    30.0
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from onetime.errors import InvalidDigitCount
from onetime.hashes import SHA1, MacAlgorithm

MIN_DIGITS = 6
MAX_DIGITS = 9
DEFAULT_STEP = timedelta(seconds=30)
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def as_utc(moment: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware datetimes pass through."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass(frozen=True)
class OTPConfig:
    """
    Parameters shared by HOTP and TOTP code generation.

    Args:
        digits: Code length, 6 to 9
        step: Width of each TOTP time window (default: 30 seconds)
        base_time: Instant of TOTP counter zero (default: Unix epoch)
        hash_algorithm: Hash used inside HMAC (default: SHA-1)

    Raises:
        InvalidDigitCount: digits outside 6-9
        ValueError: step is not positive
        TypeError: digits is not an int
    """

    digits: int
    step: timedelta = DEFAULT_STEP
    base_time: datetime = UNIX_EPOCH
    hash_algorithm: MacAlgorithm = SHA1

    def __post_init__(self):
        if isinstance(self.digits, bool) or not isinstance(self.digits, int):
            raise TypeError(f"digits must be an int, got {type(self.digits).__name__}")
        if not MIN_DIGITS <= self.digits <= MAX_DIGITS:
            raise InvalidDigitCount(self.digits)
        if self.step <= timedelta(0):
            raise ValueError(f"Step must be positive, got {self.step}")
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "base_time", as_utc(self.base_time))

    @classmethod
    def new(cls, digits: int) -> "OTPConfig":
        """
        Default configuration for the given code length.

        SHA-1, 30-second steps and the Unix epoch as base time.

        Raises:
            InvalidDigitCount: digits outside 6-9
        """
        return cls(digits)

    @property
    def modulus(self) -> int:
        """10 ** digits."""
        return 10**self.digits
