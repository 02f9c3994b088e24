"""
Key Search Package

This package recovers cipher keys by exhaustive search over the 10-bit key
space.
"""

from .brute_force import (
    KeySearch, KeySearchResult, encrypt_all_keys, find_all_keys,
    recover_key, recover_key_chunked, recover_key_vectorized,
)

__all__ = ['KeySearch', 'KeySearchResult', 'encrypt_all_keys', 'find_all_keys',
           'recover_key', 'recover_key_chunked', 'recover_key_vectorized']
