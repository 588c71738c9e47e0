import pytest
from pydantic import ValidationError

from cipherstack.cipher.registry import AlgorithmRegistry
from cipherstack.config import Settings
from cipherstack.errors import InvalidKeyFormat, LayerError
from cipherstack.pipeline import Layer, Pipeline, parse_layer, run_pipeline

MONO_KEY = "qwertyuiopasdfghjklzxcvbnm"


def _layers(*pairs):
    return [Layer(algorithm=a, key=k) for a, k in pairs]


def test_caesar_then_vigenere_roundtrip():
    layers = _layers(("caesar", "1"), ("vigenere", "key"))
    enc = run_pipeline("abc", layers, True)
    assert enc.result == "lgb"
    assert enc.steps == ""
    assert run_pipeline(enc.result, layers, False).result == "abc"


def test_decryption_walks_layers_backwards():
    layers = _layers(("vigenere", "key"), ("railfence", "2"))
    ct = run_pipeline("abcdef", layers, True).result
    assert ct == "kaifnd"
    # Undoing the layers in encryption order gives the wrong text.
    wrong = run_pipeline(run_pipeline(ct, layers[:1], False).result, layers[1:], False).result
    assert wrong != "abcdef"
    assert run_pipeline(ct, layers, False).result == "abcdef"


@pytest.mark.parametrize(
    "pairs",
    [
        (("caesar", "7"), ("railfence", "3"), ("rowcolumn", "zebra"), ("vigenere", "lemon")),
        (("monoalphabetic", MONO_KEY), ("rowcolumn", "secret"), ("caesar", "-11")),
        (("railfence", "4"), ("railfence", "2"), ("rowcolumn", "aab"), ("monoalphabetic", MONO_KEY)),
    ],
)
def test_multi_layer_roundtrip(pairs):
    text = "we are discovered, flee at once!"
    layers = _layers(*pairs)
    ct = run_pipeline(text, layers, True).result
    assert ct != text
    assert run_pipeline(ct, layers, False).result == text


def test_empty_layers_are_skipped():
    layers = _layers(("", ""), ("caesar", "3"), ("", "ignored"))
    assert run_pipeline("HELLO", layers, True).result == "KHOOR"
    assert run_pipeline("HELLO", [], True).result == "HELLO"


def test_sdes_layer_produces_steps():
    out = run_pipeline("10100101", _layers(("des", "1010000010")), True)
    assert out.result == "11001010"
    assert out.steps.startswith("Key Generation Steps:")
    assert "Step 5 - Final Permutation (IP^-1): 11001010" in out.steps


def test_sdes_traces_are_joined_per_layer():
    layers = _layers(("des", "1010000010"), ("caesar", "5"), ("des", "0111111101"))
    out = run_pipeline("10100101", layers, True)
    assert out.steps.count("Key Generation Steps:") == 2
    assert "\n\nKey Generation Steps:" in out.steps


def test_trace_separator_from_settings():
    reg = AlgorithmRegistry(Settings(trace_separator="\n-----\n"))
    layers = _layers(("des", "1010000010"), ("des", "1010000010"))
    out = run_pipeline("10100101", layers, True, registry=reg)
    assert "\n-----\nKey Generation Steps:" in out.steps


def test_sdes_roundtrip_when_inversion_enabled():
    reg = AlgorithmRegistry(Settings(sdes_invert_on_decrypt=True))
    layers = _layers(("caesar", "3"), ("des", "1010000010"), ("railfence", "3"))
    ct = run_pipeline("10010111", layers, True, registry=reg).result
    assert run_pipeline(ct, layers, False, registry=reg).result == "10010111"


def test_sdes_default_decrypt_repeats_encryption():
    reg = AlgorithmRegistry(Settings())
    layers = _layers(("des", "1010000010"))
    assert run_pipeline("10010111", layers, False, registry=reg).result == "00111000"


def test_failing_layer_is_reported_with_position():
    layers = _layers(("caesar", "3"), ("railfence", "three"))
    with pytest.raises(LayerError) as info:
        run_pipeline("hello", layers, True)
    assert info.value.position == 2
    assert info.value.algorithm == "railfence"
    assert isinstance(info.value.__cause__, InvalidKeyFormat)

    # Decryption reaches the broken layer first but keeps the original numbering.
    with pytest.raises(LayerError) as info:
        run_pipeline("hello", layers, False)
    assert info.value.position == 2


def test_layer_model():
    assert Layer(algorithm="  Caesar ", key="3").algorithm == "caesar"
    assert Layer(algorithm=None).algorithm == ""
    with pytest.raises(ValidationError):
        Layer(algorithm="enigma", key="x")


def test_parse_layer():
    assert parse_layer("caesar:3") == Layer(algorithm="caesar", key="3")
    assert parse_layer("rowcolumn:a:b").key == "a:b"
    assert parse_layer("vigenere:").key == ""
    with pytest.raises(ValueError):
        parse_layer("caesar")


def test_pipeline_model():
    pipe = Pipeline(layers=_layers(("caesar", "1"), ("vigenere", "key")))
    enc = pipe.run("abc")
    assert enc.result == "lgb"
    assert pipe.reversed_direction().run(enc.result).result == "abc"
