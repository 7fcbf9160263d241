from Crypto.Util.number import bytes_to_long, long_to_bytes


def le_bytes_to_int(data):
    """Little-endian bytes to an unsigned integer."""
    return bytes_to_long(bytes(data)[::-1])


def int_to_le_bytes(n, size):
    """Unsigned integer to exactly `size` little-endian bytes."""
    return long_to_bytes(n, size)[::-1]
