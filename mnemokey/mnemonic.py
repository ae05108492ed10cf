"""
BIP39 mnemonic codec: entropy <-> checksummed word sequence
"""

import logging
import secrets
from typing import List

from mnemokey.config import ENTROPY_BITS, ENTROPY_BYTES, WORD_BITS, WORD_COUNTS, DEFAULT_STRENGTH
from mnemokey.crypto import nfkd, sha256
from mnemokey.errors import InvalidChecksum, InvalidEntropyLength, InvalidWordCount, MnemonicError
from mnemokey.language import Language

logger = logging.getLogger(__name__)


def checksum_bits_for(entropy_length: int) -> int:
    """Number of checksum bits appended to `entropy_length` bytes of entropy"""
    return entropy_length * 8 // 32


class Mnemonic:
    """
    A validated BIP39 mnemonic

    Holds the entropy, the phrase encoding it and the wordlist language.
    Instances are built with `generate`, `from_entropy` or `from_phrase` and
    never change afterwards.
    """

    __slots__ = ("_entropy", "_language", "_phrase")

    def __init__(self, entropy: bytes, language: Language, phrase: str):
        self._entropy = bytes(entropy)
        self._language = language
        self._phrase = phrase

    # -------------------------
    # Construction
    # -------------------------

    @classmethod
    def generate(cls, strength: int = DEFAULT_STRENGTH, language=Language.ENGLISH) -> "Mnemonic":
        """
        Create a mnemonic from fresh random entropy

        Args:
            strength: Entropy size in bits (128 for 12 words ... 256 for 24 words)
            language: Wordlist language

        Returns:
            New Mnemonic
        """
        if strength not in ENTROPY_BITS:
            raise InvalidEntropyLength(strength)
        # Use the system CSPRNG
        return cls.from_entropy(secrets.token_bytes(strength // 8), language)

    @classmethod
    def from_entropy(cls, entropy: bytes, language=Language.ENGLISH) -> "Mnemonic":
        """
        Encode entropy as a phrase

        The SHA-256 checksum byte is appended to the entropy and the bit
        string is cut into 11-bit groups; the trailing partial group (the
        checksum bits beyond ENT/32) is dropped.

        Args:
            entropy: 16, 20, 24, 28 or 32 bytes
            language: Wordlist language

        Returns:
            Mnemonic holding the entropy and its phrase
        """
        entropy = bytes(entropy)
        if len(entropy) not in ENTROPY_BYTES:
            raise InvalidEntropyLength(len(entropy))
        language = Language.parse(language)
        word_list = language.word_list()

        checksum = sha256(entropy)[0]
        total_bits = len(entropy) * 8 + 8
        value = int.from_bytes(entropy + bytes([checksum]), "big")

        word_count = total_bits // WORD_BITS
        # Discard bits that do not fill a complete group
        value >>= total_bits - word_count * WORD_BITS

        phrase = " ".join(word_list.get(index) for index in _indices(value, word_count))
        logger.debug("Encoded %d bits of entropy as %d words", len(entropy) * 8, word_count)
        return cls(entropy, language, phrase)

    @classmethod
    def from_phrase(cls, phrase: str, language=Language.ENGLISH) -> "Mnemonic":
        """
        Decode and validate a phrase

        Args:
            phrase: Whitespace-separated words
            language: Wordlist language

        Returns:
            Mnemonic holding the recovered entropy

        Raises:
            InvalidWord: a word is not in the wordlist
            InvalidWordCount: not 12, 15, 18, 21 or 24 words
            InvalidChecksum: the embedded checksum does not match
        """
        language = Language.parse(language)
        word_map = language.word_map()
        words = nfkd(phrase).split()

        value = 0
        for word in words:
            value = (value << WORD_BITS) | word_map.get_index(word)

        if len(words) not in WORD_COUNTS:
            raise InvalidWordCount(len(words))

        total_bits = len(words) * WORD_BITS
        checksum_bits = total_bits // 33
        entropy_bits = total_bits - checksum_bits

        entropy = (value >> checksum_bits).to_bytes(entropy_bits // 8, "big")
        checksum = value & ((1 << checksum_bits) - 1)

        expected = sha256(entropy)[0] >> (8 - checksum_bits)
        if checksum != expected:
            raise InvalidChecksum()

        logger.debug("Decoded %d-word %s mnemonic", len(words), language.value)
        return cls(entropy, language, " ".join(words))

    @classmethod
    def validate(cls, phrase: str, language=Language.ENGLISH) -> None:
        """Raise a MnemonicError if `phrase` is not a valid mnemonic"""
        cls.from_phrase(phrase, language)

    @classmethod
    def is_valid(cls, phrase: str, language=Language.ENGLISH) -> bool:
        try:
            cls.from_phrase(phrase, language)
        except MnemonicError:
            return False
        return True

    # -------------------------
    # Accessors
    # -------------------------

    @property
    def entropy(self) -> bytes:
        return self._entropy

    @property
    def language(self) -> Language:
        return self._language

    @property
    def phrase(self) -> str:
        return self._phrase

    @property
    def words(self) -> List[str]:
        return self._phrase.split(" ")

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def strength(self) -> int:
        return len(self._entropy) * 8

    @property
    def checksum_bits(self) -> int:
        return checksum_bits_for(len(self._entropy))

    def to_seed(self, passphrase: str = ""):
        from mnemokey.seed import Seed
        return Seed.from_mnemonic(self, passphrase)

    def __str__(self) -> str:
        return self._phrase

    def __repr__(self) -> str:
        return f"Mnemonic(words={self.word_count}, language={self._language.value})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mnemonic):
            return NotImplemented
        return self._entropy == other._entropy and self._language == other._language

    def __hash__(self) -> int:
        return hash((self._entropy, self._language))


def _indices(value: int, count: int) -> List[int]:
    """Split `value` into `count` 11-bit word indices, most significant first"""
    indices = []
    for _ in range(count):
        indices.append(value & 0x7FF)
        value >>= WORD_BITS
    indices.reverse()
    return indices

