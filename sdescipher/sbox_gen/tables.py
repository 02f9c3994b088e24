"""
Fixed Permutation and Substitution Tables

This module holds the constant tables of the cipher: the initial and final
bit permutations and the two 4x4 S-boxes. All tables are tuples so they
cannot be modified after import.
"""

from typing import Tuple

# Permutation tables. Entry i names the (1-based, LSB = 1) source bit that
# becomes bit i + 1 of the output.
IP = (2, 6, 3, 1, 4, 8, 5, 7)          # Initial Permutation
IP_INVERSE = (4, 1, 3, 5, 7, 2, 8, 6)  # Final Permutation

# S-boxes: 4 rows x 4 columns of 2-bit values
SBOX1 = (
    (1, 0, 3, 2),
    (3, 2, 1, 0),
    (0, 2, 1, 3),
    (3, 1, 0, 2),
)

SBOX2 = (
    (0, 1, 2, 3),
    (2, 3, 1, 0),
    (3, 0, 1, 2),
    (2, 1, 0, 3),
)

SBoxTable = Tuple[Tuple[int, ...], ...]


def sbox_lookup(sbox: SBoxTable, nibble: int) -> int:
    """
    Substitute a 4-bit value through a 4x4 S-box.

    The top two bits of the nibble select the row and the bottom two bits
    select the column.

    Args:
        sbox: One of SBOX1 or SBOX2
        nibble: A 4-bit input value

    Returns:
        The 2-bit S-box output
    """
    return sbox[(nibble >> 2) & 0x03][nibble & 0x03]


def flatten_sbox(sbox: SBoxTable) -> Tuple[int, ...]:
    """Return the S-box as 16 outputs indexed directly by the 4-bit input."""
    return tuple(sbox_lookup(sbox, x) for x in range(16))
