"""
SDESCipher - Simplified DES Teaching Cipher

This library implements a small Feistel block cipher in the style of
Simplified DES, together with an exhaustive key-recovery attack that
exploits its tiny key space.

Key Features:
- 8-bit blocks, 10-bit keys
- Two Feistel rounds sharing a single round key
- Fixed initial/final permutations and two 4x4 S-boxes
- Brute-force key recovery in at most 1024 trials
- S-box differential and linear analysis
"""

from .cipher_core import SDESCipher, encrypt
from .key_search import recover_key

__version__ = '0.1.0'
__author__ = 'SDESCipher Team'

__all__ = ['SDESCipher', 'encrypt', 'recover_key']
