"""
Block Cipher Implementation

This module provides the core implementation of SDESCipher, a two-round
Feistel cipher on 8-bit blocks with a 10-bit key.

Encryption applies the initial permutation, splits the block into two
nibbles, runs two identical Feistel rounds with the same round key, joins
the halves and applies the final permutation.

Bit positions are 1-based and counted from the least significant bit.
"""

from typing import Sequence, Tuple

from ..sbox_gen.tables import IP, IP_INVERSE, SBOX1, SBOX2, sbox_lookup
from ..key_schedule.simple_key_schedule import expand_key, validate_key

BLOCK_BITS = 8
BLOCK_MASK = (1 << BLOCK_BITS) - 1
NIBBLE_MASK = 0x0F


def validate_block(block: int) -> int:
    """
    Check that a block is an integer in range 0..255.

    Raises:
        TypeError: If the block is not an integer
        ValueError: If the block does not fit in 8 bits
    """
    if isinstance(block, bool) or not isinstance(block, int):
        raise TypeError(f"Block must be an int, got {type(block).__name__}")
    if not 0 <= block <= BLOCK_MASK:
        raise ValueError(f"Block must be in range 0..{BLOCK_MASK}, got {block}")
    return block


def get_bit(value: int, position: int) -> int:
    """Get the bit at a 1-based position counted from the right."""
    return (value >> (position - 1)) & 1


def set_bit(value: int, position: int, bit: int) -> int:
    """Set or clear the bit at a 1-based position counted from the right."""
    if bit:
        return value | (1 << (position - 1))
    return value & ~(1 << (position - 1))


def permute(value: int, table: Sequence[int]) -> int:
    """
    Apply a permutation table to a value.

    Bit i + 1 of the result is taken from bit table[i] of the input.

    Args:
        value: The value to permute
        table: 1-based source bit positions, one per output bit

    Returns:
        The permuted value
    """
    result = 0
    for i, source in enumerate(table):
        result = set_bit(result, i + 1, get_bit(value, source))
    return result


def split_byte(value: int) -> Tuple[int, int]:
    """Split a byte into its (upper, lower) nibbles."""
    return (value >> 4) & NIBBLE_MASK, value & NIBBLE_MASK


def combine_halves(left: int, right: int) -> int:
    """Join two nibbles into one byte, left half on top."""
    return ((left & NIBBLE_MASK) << 4) | (right & NIBBLE_MASK)


def f_function(right_half: int, round_key: int) -> int:
    """
    The round function F.

    The 4-bit half is duplicated into both nibbles of a byte, mixed with the
    round key, and each nibble of the result is substituted through its
    S-box (upper through SBOX1, lower through SBOX2).

    Args:
        right_half: A 4-bit value
        round_key: An 8-bit round key

    Returns:
        A 4-bit value
    """
    expanded = ((right_half & NIBBLE_MASK) << 4) | (right_half & NIBBLE_MASK)
    mixed = expanded ^ round_key

    upper, lower = split_byte(mixed)
    s1_result = sbox_lookup(SBOX1, upper)
    s2_result = sbox_lookup(SBOX2, lower)

    return (s1_result << 2) | s2_result


def feistel_round(left: int, right: int, round_key: int) -> Tuple[int, int]:
    """One Feistel round: (left, right) becomes (right, left ^ F(right))."""
    return right, left ^ f_function(right, round_key)


class SDESCipher:
    """
    Two-round Feistel block cipher on 8-bit blocks.

    Both rounds use the same round key, the low byte of the 10-bit key.
    """

    def __init__(self, key: int):
        """
        Initialize the cipher with a key.

        Args:
            key: The 10-bit cipher key (0..1023)
        """
        self.key = validate_key(key)
        self.round_keys = expand_key(key)

    @property
    def round_key(self) -> int:
        return self.round_keys[0]

    def encrypt_block(self, plaintext: int) -> int:
        """
        Encrypt a single 8-bit block.

        Args:
            plaintext: The plaintext block (0..255)

        Returns:
            The ciphertext block
        """
        state = permute(validate_block(plaintext), IP)
        left, right = split_byte(state)

        for round_key in self.round_keys:
            left, right = feistel_round(left, right, round_key)

        state = combine_halves(left, right)
        return permute(state, IP_INVERSE)

    def encrypt_bytes(self, data: bytes) -> bytes:
        """
        Encrypt every byte of data independently.

        This is a per-byte convenience for demonstrations, not a mode of
        operation.
        """
        return bytes(self.encrypt_block(b) for b in data)

    def __repr__(self) -> str:
        return f"SDESCipher(key={self.key:#05x})"


def encrypt(plaintext: int, key: int) -> int:
    """
    Convenience function to encrypt a single block.

    Args:
        plaintext: The plaintext block (0..255)
        key: The 10-bit cipher key (0..1023)

    Returns:
        The ciphertext block
    """
    return SDESCipher(key).encrypt_block(plaintext)


if __name__ == "__main__":
    plaintext = 0b11010111
    key = 0b1010000010

    ciphertext = encrypt(plaintext, key)

    print(f"Plaintext:  {plaintext:08b}")
    print(f"Key:        {key:010b}")
    print(f"Ciphertext: {ciphertext:08b}")
