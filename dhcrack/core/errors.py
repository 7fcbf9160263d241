class DhCrackError(Exception):
    """Base class for every failure reported by dhcrack."""


class InvalidHexError(DhCrackError, ValueError):
    def __init__(self, detail):
        super().__init__(f"invalid hex string: {detail}")
        self.detail = detail


class InvalidKeyLengthError(DhCrackError, ValueError):
    def __init__(self, length):
        super().__init__(f"invalid key length: expected 8 bytes, got {length}")
        self.length = length


class ZeroPublicKeyError(DhCrackError, ValueError):
    def __init__(self):
        super().__init__("invalid public key: value cannot be zero")


class DiscreteLogError(DhCrackError):
    def __init__(self):
        super().__init__("failed to compute discrete logarithm")
