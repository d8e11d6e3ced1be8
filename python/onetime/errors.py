"""Exceptions raised by onetime."""


class OTPError(Exception):
    """Base class for onetime errors."""

    pass


class InvalidDigitCount(OTPError, ValueError):
    """Requested code length is outside the supported 6-9 digit range."""

    def __init__(self, digits: int):
        self.digits = digits
        if digits < 6:
            message = f"minimum of 6 digits is required for a valid HOTP code, got {digits}"
        else:
            message = f"HOTP code cannot be longer than 9 digits, got {digits}"
        super().__init__(message)


class SecretDecodeError(OTPError, ValueError):
    """Secret is not valid base32."""

    pass
