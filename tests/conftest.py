"""
Pytest fixtures for mnemokey tests
"""

import pytest

from mnemokey.bip32 import ExtendedKey
from mnemokey.language import Language
from mnemokey.mnemonic import Mnemonic

ZERO_PHRASE = "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
TREZOR_SEED = (
    "c55257c360c07c72029aebc1b53c05ed0362ada38ead3e3e9efa3708e53495531f"
    "09a6987599d18264c1e1c92f2cf141630c7a3c4ab7c81b2f001698e7463b04"
)
BIP32_VECTOR1_SEED = bytes.fromhex("000102030405060708090a0b0c0d0e0f")


@pytest.fixture
def english():
    """English wordlist."""
    return Language.ENGLISH.word_list()


@pytest.fixture
def zero_mnemonic() -> Mnemonic:
    """Mnemonic for 16 zero bytes of entropy."""
    return Mnemonic.from_entropy(bytes(16))


@pytest.fixture
def vector1_master() -> ExtendedKey:
    """Master key of BIP32 test vector 1."""
    return ExtendedKey.from_seed(BIP32_VECTOR1_SEED)
