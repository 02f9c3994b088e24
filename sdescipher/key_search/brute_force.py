"""
Exhaustive Key Recovery

This module recovers a key from one known plaintext/ciphertext pair by
trying every key in the 10-bit key space in ascending order. The key space
holds only 1024 keys, so the search needs at most 1024 encryptions.

Only the low 8 bits of a key affect encryption, so every match comes with
three equivalent keys that differ in the two high bits. The search always
reports the numerically smallest matching key, which is therefore below 256
and may differ from the key that actually produced the ciphertext.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from ..cipher_core.block_cipher import encrypt, permute, split_byte, validate_block
from ..key_schedule.simple_key_schedule import KEY_SPACE, NUM_ROUNDS, ROUND_KEY_MASK
from ..sbox_gen.tables import IP, IP_INVERSE, SBOX1, SBOX2, flatten_sbox

logger = logging.getLogger(__name__)

# Default parameters for the chunked search
SEARCH_DEFAULT_PARAMS = {
    'chunk_size': 256,  # Keys per chunk
    'max_workers': 1,   # Threads; overridden by SDES_SEARCH_WORKERS
}


@dataclass
class KeySearchResult:
    """Outcome of an exhaustive key search."""
    plaintext: int
    ciphertext: int
    key: Optional[int]
    trials: int

    @property
    def found(self) -> bool:
        return self.key is not None


class KeySearch:
    """
    Sequential search for the smallest key that maps a plaintext to a
    target ciphertext.
    """

    def __init__(self, plaintext: int, target_ciphertext: int,
                 keys: Optional[Iterable[int]] = None):
        """
        Initialize the search.

        Args:
            plaintext: The known plaintext block
            target_ciphertext: The ciphertext block to reproduce
            keys: Candidate keys in ascending order (default: the full key space)
        """
        self.plaintext = validate_block(plaintext)
        self.target_ciphertext = validate_block(target_ciphertext)
        self.keys = range(KEY_SPACE) if keys is None else keys

    def run(self) -> KeySearchResult:
        """
        Try each candidate key until one reproduces the target ciphertext.

        Returns:
            A KeySearchResult; its key is None if no candidate matched
        """
        trials = 0
        for candidate in self.keys:
            trials += 1
            if encrypt(self.plaintext, candidate) == self.target_ciphertext:
                logger.debug(f"Key {candidate:#05x} matched after {trials} trials")
                return KeySearchResult(self.plaintext, self.target_ciphertext, candidate, trials)

        logger.debug(f"No key matched after {trials} trials")
        return KeySearchResult(self.plaintext, self.target_ciphertext, None, trials)


def recover_key(plaintext: int, target_ciphertext: int) -> Optional[int]:
    """
    Recover the smallest key that encrypts plaintext to target_ciphertext.

    Args:
        plaintext: The known plaintext block (0..255)
        target_ciphertext: The observed ciphertext block (0..255)

    Returns:
        The smallest matching key, or None if no key in 0..1023 matches
    """
    search = KeySearch(plaintext, target_ciphertext)
    logger.info(f"Brute-forcing keys for plaintext {plaintext:#04x} -> ciphertext {target_ciphertext:#04x}")
    result = search.run()

    if result.found:
        logger.info(f"Found key {result.key:#05x} after {result.trials} trials")
    else:
        logger.info(f"No key found after {result.trials} trials")
    return result.key


def find_all_keys(plaintext: int, target_ciphertext: int) -> List[int]:
    """
    List every key that encrypts plaintext to target_ciphertext.

    Returns:
        Matching keys in ascending order (empty if none match)
    """
    validate_block(target_ciphertext)
    ciphertexts = encrypt_all_keys(plaintext)
    return [int(k) for k in np.flatnonzero(ciphertexts == target_ciphertext)]


def _permute_array(values: np.ndarray, table) -> np.ndarray:
    # Same bit-indexing rule as block_cipher.permute, applied elementwise
    result = np.zeros_like(values)
    for i, source in enumerate(table):
        result |= ((values >> (source - 1)) & 1) << i
    return result


def encrypt_all_keys(plaintext: int) -> np.ndarray:
    """
    Encrypt one plaintext under every key in the key space at once.

    Args:
        plaintext: The plaintext block (0..255)

    Returns:
        An array of 1024 ciphertexts, indexed by key
    """
    sbox1 = np.array(flatten_sbox(SBOX1), dtype=np.int64)
    sbox2 = np.array(flatten_sbox(SBOX2), dtype=np.int64)

    keys = np.arange(KEY_SPACE, dtype=np.int64)
    round_keys = keys & ROUND_KEY_MASK

    # The initial permutation does not depend on the key
    left0, right0 = split_byte(permute(validate_block(plaintext), IP))
    left = np.full(KEY_SPACE, left0, dtype=np.int64)
    right = np.full(KEY_SPACE, right0, dtype=np.int64)

    for _ in range(NUM_ROUNDS):
        mixed = ((right << 4) | right) ^ round_keys
        f_result = (sbox1[(mixed >> 4) & 0x0F] << 2) | sbox2[mixed & 0x0F]
        left, right = right, left ^ f_result

    combined = (left << 4) | right
    return _permute_array(combined, IP_INVERSE).astype(np.uint8)


def recover_key_vectorized(plaintext: int, target_ciphertext: int) -> Optional[int]:
    """
    Same contract as recover_key, computed with one vectorised sweep of the
    key space.
    """
    validate_block(target_ciphertext)
    matches = np.flatnonzero(encrypt_all_keys(plaintext) == target_ciphertext)
    if matches.size == 0:
        return None
    return int(matches[0])


def _search_chunk(plaintext: int, target_ciphertext: int, start: int, stop: int) -> KeySearchResult:
    logger.debug(f"Searching keys {start:#05x}..{stop - 1:#05x}")
    return KeySearch(plaintext, target_ciphertext, range(start, stop)).run()


def recover_key_chunked(plaintext: int, target_ciphertext: int,
                        chunk_size: Optional[int] = None,
                        max_workers: Optional[int] = None) -> Optional[int]:
    """
    Recover the smallest matching key by searching key ranges independently.

    Each chunk reports its own smallest match and the overall answer is the
    minimum of those, so the result does not depend on which chunk finishes
    first.

    Args:
        plaintext: The known plaintext block
        target_ciphertext: The observed ciphertext block
        chunk_size: Keys per chunk (default: SEARCH_DEFAULT_PARAMS)
        max_workers: Worker threads (default: SDES_SEARCH_WORKERS or
            SEARCH_DEFAULT_PARAMS)

    Returns:
        The smallest matching key, or None if no key matches
    """
    if chunk_size is None:
        chunk_size = SEARCH_DEFAULT_PARAMS['chunk_size']
    if chunk_size <= 0:
        raise ValueError(f"Chunk size must be positive, got {chunk_size}")

    if max_workers is None:
        max_workers = int(os.environ.get('SDES_SEARCH_WORKERS',
                                         SEARCH_DEFAULT_PARAMS['max_workers']))
    if max_workers <= 0:
        raise ValueError(f"Worker count must be positive, got {max_workers}")

    validate_block(plaintext)
    validate_block(target_ciphertext)

    bounds = [(start, min(start + chunk_size, KEY_SPACE))
              for start in range(0, KEY_SPACE, chunk_size)]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(_search_chunk, plaintext, target_ciphertext, start, stop)
                   for start, stop in bounds]
        results = [future.result() for future in futures]

    found = [r.key for r in results if r.found]
    logger.info(f"Chunked search over {len(bounds)} chunks: {len(found)} chunk(s) matched")
    return min(found) if found else None


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    plaintext = 0b11010111
    target_ciphertext = encrypt(plaintext, 0b1010000010)

    print(f"Target Ciphertext: {target_ciphertext:08b}")
    print("Brute-forcing keys...")
    key = recover_key(plaintext, target_ciphertext)
    if key is None:
        print("No key found")
    else:
        print(f"Found key: {key:010b}")
