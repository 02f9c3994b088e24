"""
Simplified Key Schedule

This module turns a 10-bit cipher key into round keys. The schedule is
deliberately trivial: the low 8 bits of the key form a single round key that
is reused by both Feistel rounds, and the two high bits are never used.
Keys that differ only in those two bits are therefore equivalent.
"""

import secrets
from typing import List, Optional, Tuple

import argon2
from argon2.low_level import Type

KEY_BITS = 10
KEY_SPACE = 1 << KEY_BITS   # 1024 keys
KEY_MASK = KEY_SPACE - 1
ROUND_KEY_MASK = 0xFF
NUM_ROUNDS = 2

# Default parameters for Argon2id password-based key derivation
KDF_DEFAULT_PARAMS = {
    'time_cost': 4,       # Number of iterations
    'memory_cost': 65536, # 64 MB
    'parallelism': 4,     # Number of threads
    'hash_len': 4,        # Smallest output Argon2 allows; truncated to KEY_BITS
    'salt_len': 16        # Salt size in bytes
}


def validate_key(key: int) -> int:
    """
    Check that a key is an integer in the 10-bit key space.

    Args:
        key: The key to check

    Returns:
        The key unchanged

    Raises:
        TypeError: If the key is not an integer
        ValueError: If the key is outside 0..1023
    """
    if isinstance(key, bool) or not isinstance(key, int):
        raise TypeError(f"Key must be an int, got {type(key).__name__}")
    if not 0 <= key < KEY_SPACE:
        raise ValueError(f"Key must be in range 0..{KEY_MASK}, got {key}")
    return key


def derive_round_key(key: int) -> int:
    """
    Derive the round key used by every Feistel round.

    Only the low 8 bits of the key are used.
    """
    return validate_key(key) & ROUND_KEY_MASK


def expand_key(key: int, num_rounds: int = NUM_ROUNDS) -> List[int]:
    """
    Expand a key into one round key per round.

    There is no per-round subkey generation, every entry is the same value.

    Args:
        key: The 10-bit cipher key
        num_rounds: Number of round keys to produce

    Returns:
        A list of round keys
    """
    if num_rounds < 1:
        raise ValueError(f"Number of rounds must be positive, got {num_rounds}")
    round_key = derive_round_key(key)
    return [round_key] * num_rounds


def equivalent_keys(key: int) -> List[int]:
    """
    List every key that encrypts exactly like the given key.

    These are the four values sharing its low byte, in ascending order.
    """
    round_key = derive_round_key(key)
    return list(range(round_key, KEY_SPACE, ROUND_KEY_MASK + 1))


def generate_key() -> int:
    """
    Generate a random 10-bit key.

    Returns:
        A key in range 0..1023
    """
    return secrets.randbelow(KEY_SPACE)


def derive_key_from_password(password: str,
                             salt: Optional[bytes] = None,
                             params: Optional[dict] = None) -> Tuple[int, bytes]:
    """
    Derive a 10-bit key from a password using Argon2id.

    The Argon2 output is read as a big-endian integer and truncated to the
    low 10 bits.

    Args:
        password: The password to derive the key from
        salt: Optional salt (will be generated if not provided)
        params: Optional overrides for KDF_DEFAULT_PARAMS

    Returns:
        A tuple of (key, salt)
    """
    settings = dict(KDF_DEFAULT_PARAMS)
    if params:
        settings.update(params)

    if salt is None:
        salt = secrets.token_bytes(settings['salt_len'])

    digest = argon2.low_level.hash_secret_raw(
        secret=password.encode('utf-8'),
        salt=salt,
        time_cost=settings['time_cost'],
        memory_cost=settings['memory_cost'],
        parallelism=settings['parallelism'],
        hash_len=settings['hash_len'],
        type=Type.ID  # Argon2id variant
    )

    key = int.from_bytes(digest, byteorder='big') & KEY_MASK
    return key, salt
