"""
Hash algorithms usable inside the HOTP HMAC.

A hash algorithm is anything with a ``mac(key, message)`` method returning
the HMAC digest. ``HashAlgorithm`` covers every hashlib digest long enough
for dynamic truncation.

Example:
    >>> from onetime.hashes import SHA256
    >>> len(SHA256.mac(b"key", b"message"))
    32
"""

import hashlib
import hmac
from dataclasses import dataclass
from typing import Protocol

# Truncation reads 4 bytes at an offset of at most 15.
MIN_DIGEST_SIZE = 0x0F + 4


class MacAlgorithm(Protocol):
    """Anything that computes an HMAC digest for HOTP."""

    def mac(self, key: bytes, message: bytes) -> bytes:
        ...


@dataclass(frozen=True)
class HashAlgorithm:
    """
    HMAC hash selected by hashlib name.

    Args:
        name: hashlib algorithm name ('sha1', 'sha256', 'sha512', ...)

    Raises:
        ValueError: unknown algorithm or digest too short for truncation
    """

    name: str

    def __post_init__(self):
        try:
            size = hashlib.new(self.name).digest_size
        except (ValueError, TypeError) as e:
            raise ValueError(f"Unsupported hash algorithm: {self.name!r}") from e
        if size < MIN_DIGEST_SIZE:
            raise ValueError(
                f"Digest of {self.name} is {size} bytes, "
                f"at least {MIN_DIGEST_SIZE} are required"
            )

    @property
    def digest_size(self) -> int:
        """Length of the HMAC output in bytes."""
        return hashlib.new(self.name).digest_size

    def mac(self, key: bytes, message: bytes) -> bytes:
        """HMAC(key, message) with this hash."""
        return hmac.new(key, message, self.name).digest()


SHA1 = HashAlgorithm("sha1")
SHA256 = HashAlgorithm("sha256")
SHA512 = HashAlgorithm("sha512")
