import numpy as np
import pytest

from sdescipher.sbox_gen.analysis import (
    calculate_differential_uniformity, calculate_linear_bias,
    calculate_shannon_entropy, difference_distribution_table,
    evaluate_cipher_sboxes, evaluate_sbox, is_balanced,
    linear_approximation_table,
)
from sdescipher.sbox_gen.tables import SBOX1, SBOX2, flatten_sbox, sbox_lookup


def test_sbox_lookup_uses_row_and_column_bits():
    assert sbox_lookup(SBOX1, 0b0101) == 2
    assert sbox_lookup(SBOX2, 0b1111) == 3
    assert sbox_lookup(SBOX1, 0b1101) == 1
    assert sbox_lookup(SBOX2, 0b0111) == 0


@pytest.mark.parametrize("sbox", [SBOX1, SBOX2])
def test_sbox_outputs_are_two_bits(sbox):
    assert all(0 <= v <= 3 for v in flatten_sbox(sbox))


@pytest.mark.parametrize("sbox", [SBOX1, SBOX2])
def test_ddt_shape_and_rows(sbox):
    ddt = difference_distribution_table(sbox)
    assert ddt.shape == (16, 4)
    assert list(ddt[0]) == [16, 0, 0, 0]
    assert np.all(ddt.sum(axis=1) == 16)


@pytest.mark.parametrize("sbox", [SBOX1, SBOX2])
def test_lat_trivial_mask(sbox):
    lat = linear_approximation_table(sbox)
    assert lat.shape == (16, 4)
    assert lat[0, 0] == 8


@pytest.mark.parametrize("sbox", [SBOX1, SBOX2])
def test_sboxes_are_balanced(sbox):
    assert is_balanced(sbox)
    assert calculate_shannon_entropy(sbox) == pytest.approx(2.0)


@pytest.mark.parametrize("sbox", [SBOX1, SBOX2])
def test_scores_are_in_range(sbox):
    assert 4 <= calculate_differential_uniformity(sbox) <= 16
    assert 0.0 <= calculate_linear_bias(sbox) <= 1.0


def test_flat_sbox_accepted():
    assert evaluate_sbox(flatten_sbox(SBOX1)) == evaluate_sbox(SBOX1)


def test_wrong_size_sbox_rejected():
    with pytest.raises(ValueError):
        evaluate_sbox([0, 1, 2])


def test_cipher_report_covers_both_sboxes():
    report = evaluate_cipher_sboxes()
    assert set(report) == {'SBOX1', 'SBOX2'}
    assert report['SBOX1']['balanced']
