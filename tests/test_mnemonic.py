import hashlib

import pytest
from mnemonic import Mnemonic as ReferenceMnemonic

from mnemokey.errors import (
    InvalidChecksum,
    InvalidEntropyLength,
    InvalidMnemonicLength,
    InvalidWord,
    InvalidWordCount,
    MnemonicError,
)
from mnemokey.language import Language
from mnemokey.mnemonic import Mnemonic

from conftest import ZERO_PHRASE

# Entropy / phrase pairs from the BIP39 reference vectors
VECTORS = [
    ("00000000000000000000000000000000", ZERO_PHRASE),
    ("7f7f7f7f7f7f7f7f7f7f7f7f7f7f7f7f",
     "legal winner thank year wave sausage worth useful legal winner thank yellow"),
    ("80808080808080808080808080808080",
     "letter advice cage absurd amount doctor acoustic avoid letter advice cage above"),
    ("ffffffffffffffffffffffffffffffff",
     "zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo wrong"),
    ("0000000000000000000000000000000000000000000000000000000000000000",
     " ".join(["abandon"] * 23 + ["art"])),
]


@pytest.mark.parametrize("entropy_hex,phrase", VECTORS)
def test_from_entropy_vectors(entropy_hex, phrase):
    mnemonic = Mnemonic.from_entropy(bytes.fromhex(entropy_hex))
    assert mnemonic.phrase == phrase
    assert str(mnemonic) == phrase
    assert mnemonic.language is Language.ENGLISH


@pytest.mark.parametrize("entropy_hex,phrase", VECTORS)
def test_from_phrase_vectors(entropy_hex, phrase):
    mnemonic = Mnemonic.from_phrase(phrase)
    assert mnemonic.entropy == bytes.fromhex(entropy_hex)
    assert mnemonic.phrase == phrase


@pytest.mark.parametrize("length,words,checksum_bits", [
    (16, 12, 4),
    (20, 15, 5),
    (24, 18, 6),
    (28, 21, 7),
    (32, 24, 8),
])
def test_round_trip_for_every_length(length, words, checksum_bits):
    for entropy in (bytes(range(length)), bytes([0xA5] * length), bytes(reversed(range(200, 200 + length)))):
        mnemonic = Mnemonic.from_entropy(entropy)
        assert mnemonic.word_count == words
        assert mnemonic.checksum_bits == checksum_bits
        assert mnemonic.strength == length * 8
        assert Mnemonic.from_phrase(mnemonic.phrase).entropy == entropy


@pytest.mark.parametrize("length", [0, 4, 12, 15, 17, 31, 33, 64])
def test_from_entropy_rejects_bad_length(length):
    with pytest.raises(InvalidEntropyLength) as exc:
        Mnemonic.from_entropy(bytes(length))
    assert exc.value.length == length


@pytest.mark.parametrize("strength,words", [(128, 12), (160, 15), (192, 18), (224, 21), (256, 24)])
def test_generate(strength, words):
    mnemonic = Mnemonic.generate(strength)
    assert mnemonic.word_count == words
    assert len(mnemonic.entropy) == strength // 8
    assert Mnemonic.is_valid(mnemonic.phrase)


@pytest.mark.parametrize("strength", [0, 96, 127, 129, 255, 288, 512])
def test_generate_rejects_bad_strength(strength):
    with pytest.raises(InvalidEntropyLength):
        Mnemonic.generate(strength)


def test_generate_is_random():
    assert Mnemonic.generate().entropy != Mnemonic.generate().entropy


def test_generate_other_language():
    mnemonic = Mnemonic.generate(128, Language.FRENCH)
    assert mnemonic.language is Language.FRENCH
    assert Mnemonic.from_phrase(mnemonic.phrase, "french") == mnemonic


def test_from_phrase_invalid_word():
    phrase = ZERO_PHRASE.replace("about", "abou")
    with pytest.raises(InvalidWord):
        Mnemonic.from_phrase(phrase)


@pytest.mark.parametrize("count", [1, 11, 13, 23, 25])
def test_from_phrase_invalid_word_count(count):
    phrase = " ".join(["abandon"] * count)
    with pytest.raises(InvalidWordCount) as exc:
        Mnemonic.from_phrase(phrase)
    assert exc.value.count == count
    assert isinstance(exc.value, InvalidMnemonicLength)


def test_from_phrase_empty():
    with pytest.raises(InvalidWordCount):
        Mnemonic.from_phrase("")


def test_from_phrase_invalid_checksum():
    with pytest.raises(InvalidChecksum):
        Mnemonic.from_phrase(" ".join(["abandon"] * 12))


@pytest.mark.parametrize("entropy_hex,phrase", VECTORS)
def test_flipping_checksum_bits_is_detected(entropy_hex, phrase, english):
    words = phrase.split()
    checksum_bits = len(bytes.fromhex(entropy_hex)) * 8 // 32
    last = Language.ENGLISH.word_map().get_index(words[-1])

    for bit in range(checksum_bits):
        tampered = words[:-1] + [english.get(last ^ (1 << bit))]
        with pytest.raises(InvalidChecksum):
            Mnemonic.validate(" ".join(tampered))


def test_flipping_entropy_bits_is_detected(english):
    entropy = bytes(range(32))
    words = Mnemonic.from_entropy(entropy).words
    word_map = Language.ENGLISH.word_map()
    checksum = hashlib.sha256(entropy).digest()[0]

    detected = 0
    for bit in range(len(entropy) * 8):
        flipped = bytearray(entropy)
        flipped[bit // 8] ^= 0x80 >> (bit % 8)
        position, offset = divmod(bit, 11)
        tampered = list(words)
        tampered[position] = english.get(word_map.get_index(words[position]) ^ (0x400 >> offset))
        phrase = " ".join(tampered)

        # A flipped entropy bit is only caught when the checksum byte changes
        if hashlib.sha256(bytes(flipped)).digest()[0] == checksum:
            assert Mnemonic.from_phrase(phrase).entropy == bytes(flipped)
        else:
            with pytest.raises(InvalidChecksum):
                Mnemonic.validate(phrase)
            detected += 1

    assert detected > 0


def test_phrase_whitespace_is_normalized():
    messy = "  " + "   ".join(ZERO_PHRASE.split()) + "\n"
    mnemonic = Mnemonic.from_phrase(messy)
    assert mnemonic.phrase == ZERO_PHRASE
    assert mnemonic.words[-1] == "about"


def test_wrong_language_is_invalid_word():
    with pytest.raises(InvalidWord):
        Mnemonic.from_phrase(ZERO_PHRASE, Language.SPANISH)


def test_validate_and_is_valid():
    assert Mnemonic.validate(ZERO_PHRASE) is None
    assert Mnemonic.is_valid(ZERO_PHRASE)
    assert not Mnemonic.is_valid(" ".join(["abandon"] * 12))
    assert not Mnemonic.is_valid("not a phrase")

    with pytest.raises(MnemonicError):
        Mnemonic.validate("abandon")


@pytest.mark.parametrize("language", ["english", "spanish", "french", "italian", "czech"])
def test_matches_reference_library(language):
    reference = ReferenceMnemonic(language)
    for length in (16, 20, 24, 28, 32):
        entropy = bytes((7 * i + length) & 0xFF for i in range(length))
        expected = reference.to_mnemonic(entropy)
        mnemonic = Mnemonic.from_entropy(entropy, language)
        assert mnemonic.phrase == expected
        assert bytes(reference.to_entropy(mnemonic.phrase)) == entropy


def test_equality_and_repr(zero_mnemonic):
    assert zero_mnemonic == Mnemonic.from_phrase(ZERO_PHRASE)
    assert zero_mnemonic != Mnemonic.from_entropy(bytes([1] * 16))
    assert hash(zero_mnemonic) == hash(Mnemonic.from_phrase(ZERO_PHRASE))
    assert "abandon" not in repr(zero_mnemonic)


def test_error_messages():
    assert str(InvalidChecksum()) == "Invalid checksum"
    assert str(InvalidWord("foo")) == "Invalid word: foo"
    assert str(InvalidWordCount(12)) == "Invalid word count: 12"
    assert str(InvalidEntropyLength(12)) == "Invalid entropy length: 12"
    assert str(InvalidMnemonicLength(12)) == "Invalid mnemonic length: 12"
