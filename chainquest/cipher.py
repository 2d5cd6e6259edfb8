"""Repeating-key XOR obfuscation with a 16-byte key."""

from __future__ import annotations

from itertools import cycle

KEY_SIZE = 16


def encrypt(data: bytes, key: bytes) -> bytes:
    """XOR data with a repeating 16-byte key."""
    if len(key) != KEY_SIZE:
        raise ValueError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
    return bytes(b ^ k for b, k in zip(data, cycle(key)))


def decrypt(data: bytes, key: bytes) -> bytes:
    """Reverse encrypt; XOR is its own inverse."""
    return encrypt(data, key)