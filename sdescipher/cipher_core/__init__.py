"""
Cipher Core Package

This package implements the core components of the block cipher: bit
permutation, the round function and the two-round Feistel network.
"""

from .block_cipher import SDESCipher, encrypt, f_function, permute

__all__ = ['SDESCipher', 'encrypt', 'f_function', 'permute']
