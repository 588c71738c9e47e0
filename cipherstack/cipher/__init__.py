"""Cipher algorithms, bit-vector helpers and the algorithm registry."""
