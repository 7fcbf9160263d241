from .errors import DhCrackError, DiscreteLogError, InvalidHexError, InvalidKeyLengthError, ZeroPublicKeyError
from .group import DEFAULT_GROUP, GENERATOR, MODULUS, Group
from .keys import DhKey, crack_dh, dh_exchange, dh_secret
