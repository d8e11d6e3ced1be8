"""Tests for display helpers."""

from datetime import datetime, timedelta, timezone

import pytest
from freezegun import freeze_time

from onetime import (
    OTPConfig,
    SecretDecodeError,
    decode_and_compute_totp,
    decode_secret,
    format_code,
    format_grouped,
    time_remaining,
)

# base32 of b"12345678901234567890"
RFC_SECRET_B32 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


class TestFormatGrouped:
    """Test format_grouped."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("123456", "123 456"),
            ("1234567", "123 456 7"),
            ("12345678", "123 456 78"),
            ("123456789", "123 456 789"),
            ("12", "12"),
            ("", ""),
        ],
    )
    def test_groups(self, code, expected):
        """Groups of three, remainder last."""
        assert format_grouped(code) == expected

    def test_leading_zeros_kept(self):
        """Zero-padded codes keep their zeros."""
        assert format_grouped("081804") == "081 804"


class TestFormatCode:
    """Test format_code."""

    def test_zero_pad(self):
        """Short codes are padded to the configured length."""
        assert format_code(OTPConfig.new(6), 81804) == "081804"
        assert format_code(OTPConfig.new(8), 7081804) == "07081804"


class TestTimeRemaining:
    """Test time_remaining."""

    def test_mid_step(self):
        """Seconds until the next boundary."""
        config = OTPConfig.new(6)
        assert time_remaining(config, 59) == 1
        assert time_remaining(config, 45) == 15

    def test_boundary_is_full_step(self):
        """Exactly on a boundary the whole step remains."""
        config = OTPConfig.new(6)
        assert time_remaining(config, 0) == 30
        assert time_remaining(config, 60) == 30

    def test_fractional_seconds_round_up(self):
        """Partial seconds count as a whole second."""
        assert time_remaining(OTPConfig.new(6), 59.5) == 1

    def test_custom_base_and_step(self):
        """Remaining time follows base time and step."""
        base = datetime(2000, 1, 1, tzinfo=timezone.utc)
        config = OTPConfig(9, step=timedelta(seconds=5), base_time=base)
        assert time_remaining(config, base + timedelta(seconds=7)) == 3

    def test_before_base(self):
        """Before base time the result stays within the step."""
        base = datetime(2000, 1, 1, tzinfo=timezone.utc)
        config = OTPConfig(6, base_time=base)
        assert time_remaining(config, base - timedelta(seconds=1)) == 1

    def test_far_future_timestamp(self):
        """Timestamps past the year 9999 are handled."""
        # 10**12 is 10 seconds into its step
        assert time_remaining(OTPConfig.new(6), 10**12 + 5) == 15

    def test_non_finite_timestamp(self):
        """Infinite timestamps are rejected."""
        with pytest.raises(ValueError):
            time_remaining(OTPConfig.new(6), float("inf"))

    @freeze_time("2009-02-13 23:31:30")
    def test_default_clock(self):
        """Omitted time reads the current clock."""
        assert time_remaining(OTPConfig.new(6)) == 30


class TestDecodeSecret:
    """Test base32 secret decoding."""

    def test_decode(self):
        """Standard base32."""
        assert decode_secret(RFC_SECRET_B32) == b"12345678901234567890"

    def test_lowercase_and_spaces(self):
        """Authenticator-style grouping and case are tolerated."""
        assert decode_secret("gezd gnbv gy3t qojq gezd gnbv gy3t qojq") == b"12345678901234567890"

    def test_missing_padding(self):
        """Padding is restored."""
        assert decode_secret("NBUQ") == b"hi"
        assert decode_secret("NBUQ====") == b"hi"

    @pytest.mark.parametrize("secret", ["ABC1DEF8", "JBSWY3DP8", "A", "not base32!"])
    def test_invalid(self, secret):
        """Malformed input raises SecretDecodeError."""
        with pytest.raises(SecretDecodeError):
            decode_secret(secret)


class TestDecodeAndComputeTOTP:
    """Test decode_and_compute_totp."""

    def test_rfc_secret(self):
        """6-digit SHA-1 code from a base32 secret."""
        assert decode_and_compute_totp(RFC_SECRET_B32, 59) == "287082"

    def test_zero_padded(self):
        """Result is always six characters."""
        code = decode_and_compute_totp(RFC_SECRET_B32, 1111111109)
        assert code == "081804"
        assert len(code) == 6

    def test_invalid_secret(self):
        """Non-base32 digits fail."""
        with pytest.raises(SecretDecodeError):
            decode_and_compute_totp("JBSWY3DPEHPK3PX1")

    @freeze_time("2009-02-13 23:31:30")
    def test_default_clock(self):
        """Omitted time reads the current clock."""
        assert decode_and_compute_totp(RFC_SECRET_B32) == "005924"
