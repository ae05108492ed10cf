"""
BIP39 wordlists (2048 words per language)
Uses the official mnemonic package for the wordlist resources
"""

import bisect
import enum
import logging
from functools import lru_cache
from typing import Dict, Iterator, List, Tuple

from mnemonic import Mnemonic as _ResourceLoader

from mnemokey.config import WORDLIST_SIZE
from mnemokey.crypto import nfkd
from mnemokey.errors import InvalidWord, WordListError

logger = logging.getLogger(__name__)


class WordList:
    """
    Ordered, immutable sequence of the 2048 words of one language

    A word's position in the list is its 11-bit index.
    """

    def __init__(self, words: List[str]):
        if len(words) != WORDLIST_SIZE:
            raise WordListError(f"Wordlist must contain exactly {WORDLIST_SIZE} words, got {len(words)}")
        if len(set(words)) != WORDLIST_SIZE:
            raise WordListError("Wordlist must contain unique words")
        self._words: Tuple[str, ...] = tuple(words)
        self._sorted: Tuple[str, ...] = tuple(sorted(self._words))

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def get(self, index: int) -> str:
        """Return the word at `index`; raises IndexError outside 0..2047"""
        if not 0 <= index < WORDLIST_SIZE:
            raise IndexError(f"word index out of range: {index}")
        return self._words[index]

    def get_word_by_prefix(self, prefix: str) -> List[str]:
        """
        Find every word starting with `prefix`

        Binary search for the first candidate, then scan forward while the
        prefix still matches. Used for auto-completion.

        Args:
            prefix: Leading characters typed so far

        Returns:
            Matching words in sorted order (empty list if none)
        """
        start = bisect.bisect_left(self._sorted, prefix)
        matches = []
        for word in self._sorted[start:]:
            if not word.startswith(prefix):
                break
            matches.append(word)
        return matches

    def __getitem__(self, index: int) -> str:
        return self.get(index)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: str) -> bool:
        return word in self._words


class WordMap:
    """Mapping from word to its index, the exact inverse of a WordList"""

    def __init__(self, word_list: WordList):
        data: Dict[str, int] = {}
        for index, word in enumerate(word_list):
            data[word] = index
            # Accept decomposed input for accented wordlists
            data.setdefault(nfkd(word), index)
        self._data = data

    def get_index(self, word: str) -> int:
        try:
            return self._data[word]
        except KeyError:
            raise InvalidWord(word) from None

    def __contains__(self, word: str) -> bool:
        return word in self._data


class Language(enum.Enum):
    """Wordlist languages; values are the mnemonic package's resource names"""

    CHINESE_SIMPLIFIED = "chinese_simplified"
    CHINESE_TRADITIONAL = "chinese_traditional"
    CZECH = "czech"
    ENGLISH = "english"
    FRENCH = "french"
    ITALIAN = "italian"
    JAPANESE = "japanese"
    KOREAN = "korean"
    SPANISH = "spanish"

    @classmethod
    def default(cls) -> "Language":
        return cls.ENGLISH

    @classmethod
    def parse(cls, value) -> "Language":
        """Accept a Language or its name, e.g. "english" or "ENGLISH" """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported language: {value!r}") from None

    def word_list(self) -> WordList:
        return _load_word_list(self)

    def word_map(self) -> WordMap:
        return _load_word_map(self)


@lru_cache(maxsize=None)
def _load_word_list(language: Language) -> WordList:
    logger.debug("Loading %s wordlist", language.value)
    return WordList(list(_ResourceLoader(language.value).wordlist))


@lru_cache(maxsize=None)
def _load_word_map(language: Language) -> WordMap:
    return WordMap(_load_word_list(language))
