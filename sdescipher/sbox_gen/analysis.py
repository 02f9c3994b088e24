"""
S-box Analysis

This module measures the cryptographic quality of the cipher's 4-bit to
2-bit S-boxes: the differential distribution table, the linear approximation
table and the output distribution. The tiny S-boxes score poorly, which is
part of why the cipher falls to exhaustive search and to the classic
differential and linear attacks.
"""

import logging
from typing import Dict, Sequence

import numpy as np

from .tables import SBOX1, SBOX2, SBoxTable, flatten_sbox

logger = logging.getLogger(__name__)

INPUT_BITS = 4
OUTPUT_BITS = 2
INPUT_SIZE = 1 << INPUT_BITS    # 16 possible inputs
OUTPUT_SIZE = 1 << OUTPUT_BITS  # 4 possible outputs


def _as_lookup(sbox) -> Sequence[int]:
    # Accept both the 4x4 row/column form and an already-flat 16-entry list
    if len(sbox) == 4 and all(len(row) == 4 for row in sbox):
        return flatten_sbox(sbox)
    if len(sbox) != INPUT_SIZE:
        raise ValueError(f"S-box must have {INPUT_SIZE} entries, got {len(sbox)}")
    return tuple(sbox)


def _parity(value: int) -> int:
    return bin(value).count('1') % 2


def difference_distribution_table(sbox: SBoxTable) -> np.ndarray:
    """
    Build the differential distribution table (DDT) of an S-box.

    Entry [dx, dy] counts the inputs x for which S(x) ^ S(x ^ dx) == dy.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A 16 x 4 integer array
    """
    lookup = _as_lookup(sbox)
    ddt = np.zeros((INPUT_SIZE, OUTPUT_SIZE), dtype=np.int32)

    for x in range(INPUT_SIZE):
        for dx in range(INPUT_SIZE):
            dy = lookup[x] ^ lookup[x ^ dx]
            ddt[dx, dy] += 1

    return ddt


def linear_approximation_table(sbox: SBoxTable) -> np.ndarray:
    """
    Build the linear approximation table (LAT) of an S-box.

    Entry [a, b] is the number of inputs x where the parity of (x & a)
    equals the parity of (S(x) & b), minus half the input space. Zero means
    the approximation is unbiased.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A 16 x 4 integer array of signed biases
    """
    lookup = _as_lookup(sbox)
    lat = np.zeros((INPUT_SIZE, OUTPUT_SIZE), dtype=np.int32)

    for input_mask in range(INPUT_SIZE):
        for output_mask in range(OUTPUT_SIZE):
            count = 0
            for x in range(INPUT_SIZE):
                if _parity(x & input_mask) == _parity(lookup[x] & output_mask):
                    count += 1
            lat[input_mask, output_mask] = count - INPUT_SIZE // 2

    return lat


def calculate_differential_uniformity(sbox: SBoxTable) -> int:
    """
    Largest DDT entry over all non-zero input differences.

    Lower values indicate better resistance to differential cryptanalysis.
    """
    ddt = difference_distribution_table(sbox)
    return int(np.max(ddt[1:, :]))


def calculate_linear_bias(sbox: SBoxTable) -> float:
    """
    Largest absolute LAT entry over non-zero masks, normalised to [0, 1].

    Lower values indicate better resistance to linear cryptanalysis.
    """
    lat = linear_approximation_table(sbox)
    max_bias = int(np.max(np.abs(lat[1:, 1:])))
    return max_bias / (INPUT_SIZE // 2)


def output_distribution(sbox: SBoxTable) -> np.ndarray:
    """Count how often each 2-bit output value occurs."""
    lookup = _as_lookup(sbox)
    return np.bincount(np.asarray(lookup, dtype=np.int64), minlength=OUTPUT_SIZE)


def calculate_shannon_entropy(sbox: SBoxTable) -> float:
    """
    Shannon entropy (in bits) of the S-box output over a uniform input.

    A balanced 2-bit S-box reaches the maximum of 2.0.
    """
    counts = output_distribution(sbox)
    probabilities = counts[counts > 0] / INPUT_SIZE
    return float(-np.sum(probabilities * np.log2(probabilities)))


def is_balanced(sbox: SBoxTable) -> bool:
    """True if every output value is produced by the same number of inputs."""
    counts = output_distribution(sbox)
    return bool(np.all(counts == INPUT_SIZE // OUTPUT_SIZE))


def evaluate_sbox(sbox: SBoxTable) -> Dict[str, float]:
    """
    Evaluate an S-box for cryptographic properties.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A dictionary of scores (lower is better for differential and linear)
    """
    diff_score = calculate_differential_uniformity(sbox)
    linear_score = calculate_linear_bias(sbox)
    entropy_score = calculate_shannon_entropy(sbox)

    return {
        'differential': diff_score,
        'linear': linear_score,
        'entropy': entropy_score,
        'balanced': is_balanced(sbox),
    }


def evaluate_cipher_sboxes() -> Dict[str, Dict[str, float]]:
    """Evaluate both of the cipher's fixed S-boxes."""
    report = {}
    for name, sbox in (('SBOX1', SBOX1), ('SBOX2', SBOX2)):
        metrics = evaluate_sbox(sbox)
        logger.info(f"{name}: differential={metrics['differential']} "
                    f"linear={metrics['linear']:.2f} entropy={metrics['entropy']:.2f}")
        report[name] = metrics
    return report


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    for name, metrics in evaluate_cipher_sboxes().items():
        print(f"{name}")
        print(f"  Differential uniformity: {metrics['differential']}")
        print(f"  Linear bias: {metrics['linear']}")
        print(f"  Entropy: {metrics['entropy']}")
        print(f"  Balanced: {metrics['balanced']}")
