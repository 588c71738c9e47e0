from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, List, Optional, Union

from ..config import Settings, load_settings
from .classical import (
    caesar_cipher,
    check_caesar_key,
    check_monoalphabetic_key,
    check_vigenere_key,
    monoalphabetic_cipher,
    vigenere_cipher,
)
from .playfair import check_playfair_key, playfair_cipher
from .sdes import SDESResult, check_sdes_key, sdes_cipher
from .transposition import check_railfence_key, check_rowcolumn_key, railfence_cipher, rowcolumn_cipher

CipherFn = Callable[[str, str, bool], Union[str, SDESResult]]


@dataclass(frozen=True)
class Algorithm:
    """One selectable layer algorithm."""
    algorithm_id: str
    name: str
    key_help: str
    cipher: CipherFn
    check_key: Callable[[str], None]
    traced: bool = False
    reversible: bool = True


def builtin_algorithms(settings: Optional[Settings] = None) -> Dict[str, Algorithm]:
    """Return the seven built-in algorithms keyed by algorithm id."""
    settings = settings or load_settings()
    algos: Dict[str, Algorithm] = {}

    algos["caesar"] = Algorithm(
        algorithm_id="caesar",
        name="Caesar",
        key_help="Integer shift, e.g. 3 (negative values shift left)",
        cipher=caesar_cipher,
        check_key=check_caesar_key,
    )
    algos["monoalphabetic"] = Algorithm(
        algorithm_id="monoalphabetic",
        name="Monoalphabetic",
        key_help="26-letter substitution alphabet, e.g. qwertyuiopasdfghjklzxcvbnm",
        cipher=monoalphabetic_cipher,
        check_key=check_monoalphabetic_key,
    )
    algos["vigenere"] = Algorithm(
        algorithm_id="vigenere",
        name="Vigenere",
        key_help="Alphabetic keyword, e.g. lemon",
        cipher=vigenere_cipher,
        check_key=check_vigenere_key,
    )
    algos["railfence"] = Algorithm(
        algorithm_id="railfence",
        name="Rail Fence",
        key_help="Number of rails (2 or more), e.g. 3",
        cipher=railfence_cipher,
        check_key=check_railfence_key,
    )
    algos["rowcolumn"] = Algorithm(
        algorithm_id="rowcolumn",
        name="Row-Column Transposition",
        key_help="Keyword; its length is the column count, e.g. zebra",
        cipher=rowcolumn_cipher,
        check_key=check_rowcolumn_key,
    )
    algos["des"] = Algorithm(
        algorithm_id="des",
        name="S-DES",
        key_help="10-bit key, e.g. 1010000010 (the text must be an 8-bit block)",
        cipher=partial(sdes_cipher, invert_on_decrypt=settings.sdes_invert_on_decrypt),
        check_key=check_sdes_key,
        traced=True,
        reversible=settings.sdes_invert_on_decrypt,
    )
    algos["playfair"] = Algorithm(
        algorithm_id="playfair",
        name="Playfair",
        key_help="Keyword, e.g. monarchy (j is merged into i)",
        cipher=playfair_cipher,
        check_key=check_playfair_key,
    )
    return algos


class AlgorithmRegistry:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or load_settings()
        self._algorithms: Dict[str, Algorithm] = builtin_algorithms(self.settings)

    def get(self, algorithm_id: str) -> Algorithm:
        if algorithm_id not in self._algorithms:
            raise KeyError(f"Unknown algorithm_id: {algorithm_id}")
        return self._algorithms[algorithm_id]

    def list(self) -> List[Algorithm]:
        return list(self._algorithms.values())

    def ids(self) -> List[str]:
        return list(self._algorithms)

    def exists(self, algorithm_id: str) -> bool:
        return algorithm_id in self._algorithms

    def key_help(self, algorithm_id: str) -> str:
        return self.get(algorithm_id).key_help
