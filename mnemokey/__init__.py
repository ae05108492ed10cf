"""
mnemokey: BIP39 mnemonic phrases and BIP32 hierarchical deterministic keys
"""

from mnemokey.bip32 import ExtendedKey
from mnemokey.errors import (
    DepthTooLarge,
    InvalidChecksum,
    InvalidChildNumber,
    InvalidDerivationPath,
    InvalidEntropyLength,
    InvalidExtendedKey,
    InvalidMnemonicLength,
    InvalidPrivateKey,
    InvalidSeedLength,
    InvalidWord,
    InvalidWordCount,
    KeyDerivationError,
    MnemokeyError,
    MnemonicError,
)
from mnemokey.keys import PrivateKey, PublicKey
from mnemokey.language import Language, WordList, WordMap
from mnemokey.mnemonic import Mnemonic
from mnemokey.path import ChildNumber, DerivationPath
from mnemokey.seed import Seed
from mnemokey.wallet import HDWallet

__version__ = "0.1.0"

__all__ = [
    "ChildNumber",
    "DepthTooLarge",
    "DerivationPath",
    "ExtendedKey",
    "HDWallet",
    "InvalidChecksum",
    "InvalidChildNumber",
    "InvalidDerivationPath",
    "InvalidEntropyLength",
    "InvalidExtendedKey",
    "InvalidMnemonicLength",
    "InvalidPrivateKey",
    "InvalidSeedLength",
    "InvalidWord",
    "InvalidWordCount",
    "KeyDerivationError",
    "Language",
    "Mnemonic",
    "MnemokeyError",
    "MnemonicError",
    "PrivateKey",
    "PublicKey",
    "Seed",
    "WordList",
    "WordMap",
]
