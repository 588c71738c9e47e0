import pytest

from cipherstack.cipher.registry import AlgorithmRegistry
from cipherstack.config import Settings
from cipherstack.evaluation.avalanche import compute_avalanche
from cipherstack.evaluation.roundtrip import run_all_algorithms, run_roundtrip_tests


def test_all_reversible_algorithms_roundtrip():
    results = run_all_algorithms(num_vectors=50, seed=1337, registry=AlgorithmRegistry(Settings()))
    assert [r.algorithm_id for r in results] == sorted(
        ["caesar", "monoalphabetic", "vigenere", "railfence", "rowcolumn", "playfair"]
    )
    for r in results:
        assert r.is_perfect, r.summary()
        assert r.success_rate == 1.0


def test_sdes_roundtrip_with_inversion():
    reg = AlgorithmRegistry(Settings(sdes_invert_on_decrypt=True))
    result = run_roundtrip_tests("des", num_vectors=100, seed=7, registry=reg)
    assert result.is_perfect, result.summary()
    assert result.summary().startswith("[PASS] des: 100/100")


def test_sdes_without_inversion_fails_roundtrip():
    result = run_roundtrip_tests("des", num_vectors=50, seed=7, registry=AlgorithmRegistry(Settings()))
    assert result.failed > 0
    assert len(result.failures) <= 10
    assert result.to_dict()["algorithm_id"] == "des"


def test_unknown_algorithm():
    with pytest.raises(KeyError):
        run_roundtrip_tests("enigma", num_vectors=1)


@pytest.mark.parametrize("input_type, n_bits", [("plaintext", 8), ("key", 10)])
def test_sdes_avalanche(input_type, n_bits):
    res = compute_avalanche(input_type=input_type, trials=40, seed=3)
    assert res.num_input_bits == n_bits
    assert len(res.per_input_bit_mean) == n_bits
    assert 0.0 < res.global_mean < 1.0
    assert res.to_dict()["input_type"] == input_type


def test_avalanche_rejects_unknown_input_type():
    with pytest.raises(ValueError):
        compute_avalanche(input_type="ciphertext")
