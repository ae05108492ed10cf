"""
BIP32 extended private keys: master key creation, child derivation and
path traversal
"""

import logging
from typing import Union

import base58

from mnemokey.config import (
    CHAIN_CODE_BYTES,
    FINGERPRINT_BYTES,
    MASTER_HMAC_KEY,
    MAX_DEPTH,
    XPRV_VERSION,
    XPUB_VERSION,
)
from mnemokey.crypto import hash160, hmac_sha512
from mnemokey.errors import DepthTooLarge, InvalidExtendedKey, InvalidPrivateKey
from mnemokey.keys import PrivateKey, PublicKey
from mnemokey.path import ChildNumber, DerivationPath
from mnemokey.seed import Seed

logger = logging.getLogger(__name__)

ZERO_FINGERPRINT = b"\x00" * FINGERPRINT_BYTES
SERIALIZED_LENGTH = 78


class ExtendedKey:
    """
    Private key bundled with a chain code and its position in the tree

    Values are immutable: deriving a child never touches the parent, so one
    parent can be shared by any number of derivations.
    """

    __slots__ = ("_key", "_chain_code", "_depth", "_child_number", "_parent_fingerprint", "_version")

    def __init__(self, key: PrivateKey, chain_code: bytes, depth: int = 0,
                 child_number: ChildNumber = ChildNumber(0),
                 parent_fingerprint: bytes = ZERO_FINGERPRINT, version: int = XPRV_VERSION):
        if len(chain_code) != CHAIN_CODE_BYTES:
            raise InvalidExtendedKey(f"Chain code must be {CHAIN_CODE_BYTES} bytes")
        if not 0 <= depth <= MAX_DEPTH:
            raise InvalidExtendedKey(f"Depth out of range: {depth}")
        if len(parent_fingerprint) != FINGERPRINT_BYTES:
            raise InvalidExtendedKey(f"Parent fingerprint must be {FINGERPRINT_BYTES} bytes")
        if not 0 <= version <= 0xFFFFFFFF:
            raise InvalidExtendedKey(f"Version out of range: {version}")
        self._key = key
        self._chain_code = bytes(chain_code)
        self._depth = depth
        self._child_number = ChildNumber.coerce(child_number)
        self._parent_fingerprint = bytes(parent_fingerprint)
        self._version = version

    # -------------------------
    # Construction
    # -------------------------

    @classmethod
    def from_seed(cls, seed: Union[Seed, bytes], version: int = XPRV_VERSION) -> "ExtendedKey":
        """
        Create the master key for a seed

        I = HMAC-SHA512(key="Bitcoin seed", data=seed); the left half is the
        master private key and the right half the master chain code.

        Args:
            seed: Seed or raw seed bytes
            version: Serialization version bytes

        Returns:
            Master ExtendedKey (depth 0)
        """
        i = hmac_sha512(MASTER_HMAC_KEY, bytes(seed))
        il, ir = i[:32], i[32:]
        key = PrivateKey.from_bytes(il)
        logger.debug("Created master key")
        return cls(key, ir, version=version)

    @classmethod
    def from_extended_private(cls, text: str) -> "ExtendedKey":
        """Parse a base58check extended private key (xprv...)"""
        try:
            raw = base58.b58decode_check(text.strip())
        except ValueError as e:
            raise InvalidExtendedKey(f"Bad extended key encoding: {e}") from None
        if len(raw) != SERIALIZED_LENGTH:
            raise InvalidExtendedKey(f"Extended key must be {SERIALIZED_LENGTH} bytes, got {len(raw)}")
        if raw[45] != 0:
            raise InvalidExtendedKey("Not an extended private key")

        version = int.from_bytes(raw[0:4], "big")
        depth = raw[4]
        parent_fingerprint = raw[5:9]
        child_number = ChildNumber.from_int(int.from_bytes(raw[9:13], "big"))
        chain_code = raw[13:45]
        if depth == 0 and (parent_fingerprint != ZERO_FINGERPRINT or child_number.to_int() != 0):
            raise InvalidExtendedKey("Master key with non-zero parent fingerprint or child number")
        try:
            key = PrivateKey.from_bytes(raw[46:78])
        except InvalidPrivateKey as e:
            raise InvalidExtendedKey(str(e)) from None
        return cls(key, chain_code, depth, child_number, parent_fingerprint, version)

    # -------------------------
    # Derivation
    # -------------------------

    def derive_child(self, child: Union[ChildNumber, int, str]) -> "ExtendedKey":
        """
        Derive one child key (CKDpriv)

        Args:
            child: ChildNumber, 32-bit wire value, or text such as "0'"

        Returns:
            New ExtendedKey one level deeper

        Raises:
            DepthTooLarge: this key is already at depth 255
            InvalidPrivateKey: the derived scalar is unusable for this index
        """
        child = ChildNumber.coerce(child)
        if self._depth >= MAX_DEPTH:
            raise DepthTooLarge()

        if child.hardened:
            # Hardened: 0x00 || ser256(k) || ser32(i)
            data = b"\x00" + self._key.to_bytes() + child.to_bytes()
        else:
            # Normal: serP(K) || ser32(i)
            data = self.public_key().to_bytes() + child.to_bytes()

        i = hmac_sha512(self._chain_code, data)
        il, ir = i[:32], i[32:]

        key = self._key.derive_child(il)
        logger.debug("Derived child %s at depth %d", child, self._depth + 1)
        return ExtendedKey(
            key,
            ir,
            depth=self._depth + 1,
            child_number=child,
            parent_fingerprint=self.fingerprint(),
            version=self._version,
        )

    def derive_path(self, path) -> "ExtendedKey":
        """
        Derive along a path, one step at a time

        Args:
            path: DerivationPath, path string (e.g., "m/44'/0'/0'/0/0") or
                an iterable of child numbers

        Returns:
            ExtendedKey at the end of the path; no key is returned if any
            step fails
        """
        key = self
        for child in DerivationPath.coerce(path):
            key = key.derive_child(child)
        return key

    # -------------------------
    # Accessors
    # -------------------------

    @property
    def private_key(self) -> PrivateKey:
        return self._key

    @property
    def chain_code(self) -> bytes:
        return self._chain_code

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def child_number(self) -> ChildNumber:
        return self._child_number

    @property
    def parent_fingerprint(self) -> bytes:
        return self._parent_fingerprint

    @property
    def version(self) -> int:
        return self._version

    @property
    def is_master(self) -> bool:
        return self._depth == 0

    def public_key(self) -> PublicKey:
        return self._key.public_key()

    def identifier(self) -> bytes:
        """HASH160 of the compressed public key"""
        return hash160(self.public_key().to_bytes())

    def fingerprint(self) -> bytes:
        return self.identifier()[:FINGERPRINT_BYTES]

    # -------------------------
    # Serialization
    # -------------------------

    def _serialize(self, version: int, key_data: bytes) -> str:
        raw = (
            version.to_bytes(4, "big")
            + bytes([self._depth])
            + self._parent_fingerprint
            + self._child_number.to_bytes()
            + self._chain_code
            + key_data
        )
        return base58.b58encode_check(raw).decode('ascii')

    def to_extended_private(self) -> str:
        """Base58check xprv string using this key's version bytes"""
        return self._serialize(self._version, b"\x00" + self._key.to_bytes())

    def to_extended_public(self, version: int = XPUB_VERSION) -> str:
        """Base58check xpub string for the matching public key"""
        return self._serialize(version, self.public_key().to_bytes())

    def __repr__(self) -> str:
        return (f"ExtendedKey(depth={self._depth}, child_number={self._child_number}, "
                f"parent_fingerprint={self._parent_fingerprint.hex()})")

    def __eq__(self, other) -> bool:
        if not isinstance(other, ExtendedKey):
            return NotImplemented
        return (
            self._key == other._key
            and self._chain_code == other._chain_code
            and self._depth == other._depth
            and self._child_number == other._child_number
            and self._parent_fingerprint == other._parent_fingerprint
            and self._version == other._version
        )

    def __hash__(self) -> int:
        return hash((self._key, self._chain_code, self._depth, self._child_number))

