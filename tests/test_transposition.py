import pytest

from cipherstack.cipher.transposition import column_order, railfence_cipher, rowcolumn_cipher
from cipherstack.errors import InvalidKeyFormat

WIKI_PT = "WEAREDISCOVEREDFLEEATONCE"


# ---------------------------------------------------------------------------
# Rail Fence
# ---------------------------------------------------------------------------

def test_railfence_three_rails():
    assert railfence_cipher(WIKI_PT, "3") == "WECRLTEERDSOEEFEAOCAIVDEN"
    assert railfence_cipher("WECRLTEERDSOEEFEAOCAIVDEN", "3", encrypt=False) == WIKI_PT


@pytest.mark.parametrize("rails", ["1", "0", "-4"])
def test_railfence_degenerate_rails_return_text(rails):
    assert railfence_cipher("hello world", rails) == "hello world"
    assert railfence_cipher("hello world", rails, encrypt=False) == "hello world"


@pytest.mark.parametrize("rails", range(2, 12))
def test_railfence_roundtrip(rails):
    text = "Meet me after the toga party, 9pm!"
    ct = railfence_cipher(text, str(rails))
    assert sorted(ct) == sorted(text)
    assert railfence_cipher(ct, str(rails), encrypt=False) == text


@pytest.mark.parametrize("text", ["", "hello", "we are discovered"])
def test_railfence_rails_beyond_text_length(text):
    ct = railfence_cipher(text, "3000000000")
    assert ct == railfence_cipher(text, str(max(len(text), 1)))
    assert railfence_cipher(ct, "3000000000", encrypt=False) == text


@pytest.mark.parametrize("key", ["three", "1_0", "٣", "2.0"])
def test_railfence_rejects_non_integer(key):
    with pytest.raises(InvalidKeyFormat):
        railfence_cipher("abc", key)


# ---------------------------------------------------------------------------
# Row-Column
# ---------------------------------------------------------------------------

def test_column_order_ties_keep_left_to_right():
    assert column_order("zebras") == [4, 2, 1, 3, 5, 0]
    assert column_order("aba") == [0, 2, 1]


def test_rowcolumn_zebras():
    ct = rowcolumn_cipher(WIKI_PT, "ZEBRAS")
    assert ct == "EVLNACDTESEAROFODEECWIREE"
    assert rowcolumn_cipher(ct, "ZEBRAS", encrypt=False) == WIKI_PT


@pytest.mark.parametrize("key", ["k", "ab", "key", "zebras", "aaaa", "hello world", "3142"])
@pytest.mark.parametrize("text", ["", "a", "abcde", "attack at dawn!", "x" * 17, "The quick brown fox"])
def test_rowcolumn_roundtrip(key, text):
    assert rowcolumn_cipher(rowcolumn_cipher(text, key), key, encrypt=False) == text


def test_rowcolumn_short_last_row_is_not_padded():
    ct = rowcolumn_cipher("abcde", "ba")
    assert ct == "bdace"
    assert rowcolumn_cipher(ct, "ba", encrypt=False) == "abcde"


def test_rowcolumn_requires_key():
    with pytest.raises(InvalidKeyFormat):
        rowcolumn_cipher("abc", "")
