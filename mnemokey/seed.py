"""
BIP39 seed: 64 bytes stretched from a mnemonic phrase and a passphrase
"""

import binascii

from mnemokey.config import PBKDF2_ROUNDS, SEED_BYTES, SEED_SALT_PREFIX
from mnemokey.crypto import nfkd, pbkdf2_hmac_sha512
from mnemokey.errors import InvalidSeedLength, SeedError


class Seed:
    """Opaque 64-byte value used to initialize an HD key tree"""

    __slots__ = ("_data",)

    def __init__(self, data: bytes):
        data = bytes(data)
        if len(data) != SEED_BYTES:
            raise InvalidSeedLength(len(data))
        self._data = data

    @classmethod
    def from_mnemonic(cls, mnemonic, passphrase: str = "") -> "Seed":
        """
        Derive the seed for a mnemonic

        PBKDF2-HMAC-SHA512 over the NFKD phrase, salted with
        NFKD("mnemonic" + passphrase), 2048 rounds.

        Args:
            mnemonic: Mnemonic instance or phrase string
            passphrase: Optional passphrase (may be empty)

        Returns:
            Seed
        """
        phrase = getattr(mnemonic, "phrase", mnemonic)
        password = nfkd(phrase).encode('utf-8')
        salt = nfkd(SEED_SALT_PREFIX + passphrase).encode('utf-8')
        return cls(pbkdf2_hmac_sha512(password, salt, PBKDF2_ROUNDS, SEED_BYTES))

    @classmethod
    def fromhex(cls, text: str) -> "Seed":
        try:
            data = bytes.fromhex(text.strip())
        except ValueError as e:
            raise SeedError(f"Seed is not valid hex: {e}") from None
        return cls(data)

    def to_bytes(self) -> bytes:
        return self._data

    def hex(self) -> str:
        return binascii.hexlify(self._data).decode('ascii')

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return "Seed(<64 bytes>)"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Seed):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)
