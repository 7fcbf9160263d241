"""
Pohlig-Hellman cracker for Diffie-Hellman keys over groups with smooth order.
"""

from .core import (
    DEFAULT_GROUP,
    GENERATOR,
    MODULUS,
    DhCrackError,
    DhKey,
    DiscreteLogError,
    Group,
    InvalidHexError,
    InvalidKeyLengthError,
    ZeroPublicKeyError,
    crack_dh,
    dh_exchange,
    dh_secret,
)
from .modules import DLogSolver, discrete_log

__all__ = [
    'DEFAULT_GROUP', 'GENERATOR', 'MODULUS', 'Group',
    'DhKey', 'crack_dh', 'dh_exchange', 'dh_secret',
    'DhCrackError', 'DiscreteLogError', 'InvalidHexError', 'InvalidKeyLengthError', 'ZeroPublicKeyError',
    'DLogSolver', 'discrete_log',
]
