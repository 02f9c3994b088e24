"""
S-box Package

This package holds the cipher's fixed permutation tables and S-boxes, and
tools for measuring the differential and linear properties of the S-boxes.
"""

from .tables import IP, IP_INVERSE, SBOX1, SBOX2, sbox_lookup
from .analysis import evaluate_sbox, difference_distribution_table, linear_approximation_table

__all__ = ['IP', 'IP_INVERSE', 'SBOX1', 'SBOX2', 'sbox_lookup',
           'evaluate_sbox', 'difference_distribution_table', 'linear_approximation_table']
