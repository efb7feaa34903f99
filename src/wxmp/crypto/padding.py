"""
Frame padding.

The platform pads frames to a multiple of 32 bytes, not the 16-byte AES
block, with PKCS#7-style fill bytes.
"""

BLOCK_SIZE = 32


def pad(data: bytes) -> bytes:
    amount = BLOCK_SIZE - len(data) % BLOCK_SIZE
    return data + bytes([amount]) * amount


def unpad(data: bytes) -> bytes:
    """Strip padding. A pad byte outside 1..32 strips nothing."""
    if not data:
        return data
    amount = data[-1]
    if amount < 1 or amount > BLOCK_SIZE:
        amount = 0
    return data[:len(data) - amount]
