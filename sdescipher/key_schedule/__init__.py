"""
Key Schedule Package

This package derives round keys from the 10-bit cipher key and provides
helpers for generating keys and reasoning about equivalent keys.
"""

from .simple_key_schedule import (
    KEY_SPACE, derive_round_key, derive_key_from_password, equivalent_keys,
    expand_key, generate_key, validate_key,
)

__all__ = ['KEY_SPACE', 'derive_round_key', 'derive_key_from_password',
           'equivalent_keys', 'expand_key', 'generate_key', 'validate_key']
