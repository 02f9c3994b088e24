import pytest

from sdescipher.cipher_core.block_cipher import (
    SDESCipher, combine_halves, encrypt, f_function, feistel_round,
    get_bit, permute, set_bit, split_byte,
)
from sdescipher.sbox_gen.tables import IP, IP_INVERSE

PLAINTEXT = 0b11010111
KEY = 0b1010000010
CIPHERTEXT = 0b00011011


def test_known_vector():
    assert encrypt(PLAINTEXT, KEY) == CIPHERTEXT


def test_cipher_object_matches_function():
    cipher = SDESCipher(KEY)
    assert cipher.round_key == 0x82
    assert cipher.round_keys == [0x82, 0x82]
    assert cipher.encrypt_block(PLAINTEXT) == CIPHERTEXT


def test_get_and_set_bit_are_lsb_first():
    assert get_bit(0b00000001, 1) == 1
    assert get_bit(0b10000000, 8) == 1
    assert get_bit(0b10000000, 1) == 0
    assert set_bit(0, 1, 1) == 0b00000001
    assert set_bit(0xFF, 8, 0) == 0x7F


def test_permute_with_initial_and_final_tables():
    assert permute(PLAINTEXT, IP) == 0xED
    assert permute(PLAINTEXT, IP_INVERSE) == 0x7E


def test_initial_and_final_tables_differ():
    differing = [v for v in range(256) if permute(v, IP) != permute(v, IP_INVERSE)]
    assert differing


def test_final_permutation_undoes_initial():
    for value in range(256):
        assert permute(permute(value, IP), IP_INVERSE) == value


def test_split_and_combine():
    assert split_byte(0xED) == (0xE, 0xD)
    assert combine_halves(0x5, 0x9) == 0x59


def test_f_function_values():
    assert f_function(0xD, 0x82) == 0xB
    assert f_function(0x5, 0x82) == 0x4


def test_f_function_output_is_four_bits():
    for half in range(16):
        for round_key in range(256):
            assert 0 <= f_function(half, round_key) <= 15


def test_feistel_round_swaps_halves():
    assert feistel_round(0xE, 0xD, 0x82) == (0xD, 0x5)
    assert feistel_round(0xD, 0x5, 0x82) == (0x5, 0x9)


def test_encrypt_is_deterministic():
    first = [encrypt(PLAINTEXT, key) for key in range(1024)]
    second = [encrypt(PLAINTEXT, key) for key in range(1024)]
    assert first == second


@pytest.mark.parametrize("plaintext", [0x00, 0x5A, 0xD7, 0xFF])
def test_high_key_bits_are_ignored(plaintext):
    for key in range(256):
        expected = encrypt(plaintext, key)
        assert encrypt(plaintext, key + 256) == expected
        assert encrypt(plaintext, key + 512) == expected
        assert encrypt(plaintext, key + 768) == expected


def test_every_input_produces_a_byte():
    for key in (0, 0x155, 0x3FF):
        for plaintext in range(256):
            assert 0 <= encrypt(plaintext, key) <= 255


def test_encrypt_bytes_is_per_byte():
    cipher = SDESCipher(KEY)
    data = bytes([PLAINTEXT, 0x00, PLAINTEXT])
    result = cipher.encrypt_bytes(data)
    assert result[0] == result[2] == CIPHERTEXT
    assert result[1] == encrypt(0x00, KEY)


@pytest.mark.parametrize("plaintext, key", [(256, 0), (-1, 0), (0, 1024), (0, -1)])
def test_out_of_range_values_are_rejected(plaintext, key):
    with pytest.raises(ValueError):
        encrypt(plaintext, key)


@pytest.mark.parametrize("plaintext, key", [("a", 0), (0, 1.5), (True, 0)])
def test_non_integer_values_are_rejected(plaintext, key):
    with pytest.raises(TypeError):
        encrypt(plaintext, key)


def test_repr_shows_key():
    assert repr(SDESCipher(KEY)) == "SDESCipher(key=0x282)"
