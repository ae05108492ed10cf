"""
Exception types raised by mnemokey
Every failure is terminal for the operation that raised it
"""


class MnemokeyError(ValueError):
    """Base class for all mnemokey errors"""


# -------------------------
# Mnemonic codec
# -------------------------

class MnemonicError(MnemokeyError):
    """A mnemonic could not be built or validated"""


class InvalidEntropyLength(MnemonicError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Invalid entropy length: {length}")


class InvalidMnemonicLength(MnemonicError):
    label = "mnemonic length"

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Invalid {self.label}: {count}")


class InvalidWordCount(InvalidMnemonicLength):
    """Raised when a phrase does not hold 12, 15, 18, 21 or 24 words"""

    label = "word count"


class InvalidWord(MnemonicError):
    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Invalid word: {word}")


class InvalidChecksum(MnemonicError):
    def __init__(self):
        super().__init__("Invalid checksum")


class WordListError(MnemokeyError):
    """A bundled wordlist does not hold 2048 unique words"""


# -------------------------
# Seed
# -------------------------

class SeedError(MnemokeyError):
    pass


class InvalidSeedLength(SeedError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Invalid seed length: {length}")


# -------------------------
# Key derivation
# -------------------------

class KeyDerivationError(MnemokeyError):
    pass


class DepthTooLarge(KeyDerivationError):
    def __init__(self):
        super().__init__("Depth too large")


class InvalidPrivateKey(KeyDerivationError):
    """Scalar is zero or not below the curve order"""

    def __init__(self, reason: str = "Invalid key"):
        super().__init__(reason)


class InvalidExtendedKey(KeyDerivationError):
    pass


# -------------------------
# Derivation paths
# -------------------------

class PathError(MnemokeyError):
    pass


class InvalidDerivationPath(PathError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Invalid derivation path: {path!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidChildNumber(PathError):
    pass
