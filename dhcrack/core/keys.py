"""
Diffie-Hellman keys over the demonstration group.

A key is a single residue stored as 8 little-endian bytes. Keys are built at
the boundary (bytes, hex or int), handed to the solver once and never mutated.
"""

import binascii
import logging
from dataclasses import dataclass

from ..modules.arith import pow_mod
from ..modules.dlog import discrete_log
from ..utils.helpers import int_to_le_bytes, le_bytes_to_int
from .errors import DiscreteLogError, InvalidHexError, InvalidKeyLengthError, ZeroPublicKeyError
from .group import DEFAULT_GROUP, Group

logger = logging.getLogger(__name__)

KEY_SIZE = 8


@dataclass(frozen=True)
class DhKey:
    value: int

    @classmethod
    def from_bytes_le(cls, data: bytes) -> 'DhKey':
        if len(data) != KEY_SIZE:
            raise InvalidKeyLengthError(len(data))
        return cls.from_int(le_bytes_to_int(data))

    @classmethod
    def from_hex_le(cls, text: str) -> 'DhKey':
        try:
            data = binascii.unhexlify(text)
        except ValueError as e:
            raise InvalidHexError(e) from e
        return cls.from_bytes_le(data)

    @classmethod
    def from_int(cls, value: int) -> 'DhKey':
        if value == 0:
            raise ZeroPublicKeyError()
        if value < 0:
            raise ValueError(f"key value must be non-negative, got {value}")
        if value >= 1 << (8 * KEY_SIZE):
            raise InvalidKeyLengthError((value.bit_length() + 7) // 8)
        return cls(value)

    def to_bytes_le(self) -> bytes:
        return int_to_le_bytes(self.value, KEY_SIZE)

    def to_hex_le(self) -> str:
        return self.to_bytes_le().hex()

    def __int__(self):
        return self.value

    def __str__(self):
        return self.to_hex_le()


def crack_dh(public_key: DhKey, group: Group = DEFAULT_GROUP) -> DhKey:
    """
    Recovers the private exponent behind public_key.
    Raises DiscreteLogError if no verified exponent exists.
    """
    private = discrete_log(group.g, public_key.value, group.p)
    if private is None:
        raise DiscreteLogError()
    # the identity maps to the exponent 0
    logger.debug("[+] Recovered private key for %s", public_key.to_hex_le())
    return DhKey(private)


def dh_exchange(private_key: DhKey, group: Group = DEFAULT_GROUP) -> DhKey:
    """Public value g^x mod p for a private exponent x."""
    return DhKey(pow_mod(group.g, private_key.value, group.p))


def dh_secret(peer_public: DhKey, private_key: DhKey, group: Group = DEFAULT_GROUP) -> DhKey:
    """Shared secret peer^x mod p."""
    return DhKey(pow_mod(peer_public.value, private_key.value, group.p))
