"""
secp256k1 private/public keys for BIP32 derivation
Scalar and point arithmetic is done by the ecdsa package
"""

from typing import Optional

from ecdsa import SECP256k1, SigningKey, VerifyingKey

from mnemokey.errors import InvalidPrivateKey

CURVE_ORDER = SECP256k1.order


def parse256(b: bytes) -> int:
    return int.from_bytes(b, "big")


def ser256(i: int) -> bytes:
    return i.to_bytes(32, "big")


class PublicKey:
    """A curve point, serialized in SEC form"""

    __slots__ = ("_vk",)

    def __init__(self, verifying_key: VerifyingKey):
        self._vk = verifying_key

    @classmethod
    def from_bytes(cls, data: bytes) -> "PublicKey":
        """Load a 33-byte compressed or 65-byte uncompressed encoding"""
        return cls(VerifyingKey.from_string(bytes(data), curve=SECP256k1))

    def to_bytes(self, compressed: bool = True) -> bytes:
        # 33 bytes (0x02/0x03 + x) or 65 bytes (0x04 + x + y)
        return self._vk.to_string("compressed" if compressed else "uncompressed")

    def hex(self) -> str:
        return self.to_bytes().hex()

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __repr__(self) -> str:
        return f"PublicKey({self.hex()})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())


class PrivateKey:
    """
    A secp256k1 scalar 0 < k < n

    Instances are immutable; derivation returns a new key.
    """

    __slots__ = ("_secret", "_public")

    def __init__(self, secret: int):
        if not 0 < secret < CURVE_ORDER:
            raise InvalidPrivateKey("Private key out of range")
        self._secret = secret
        self._public: Optional[PublicKey] = None

    @classmethod
    def from_bytes(cls, data: bytes) -> "PrivateKey":
        """
        Build a key from 32 big-endian bytes

        Raises:
            InvalidPrivateKey: wrong length, zero, or not below the curve order
        """
        if len(data) != 32:
            raise InvalidPrivateKey(f"Private key must be 32 bytes, got {len(data)}")
        return cls(parse256(data))

    def to_bytes(self) -> bytes:
        return ser256(self._secret)

    def public_key(self) -> PublicKey:
        if self._public is None:
            sk = SigningKey.from_secret_exponent(self._secret, curve=SECP256k1)
            self._public = PublicKey(sk.get_verifying_key())
        return self._public

    def derive_child(self, tweak: bytes) -> "PrivateKey":
        """
        Add a 32-byte tweak to this key modulo the curve order

        Raises:
            InvalidPrivateKey: the tweak is not below the curve order or the
                sum is zero; BIP32 treats such a child index as unusable
        """
        if len(tweak) != 32:
            raise InvalidPrivateKey(f"Tweak must be 32 bytes, got {len(tweak)}")
        il = parse256(tweak)
        if il >= CURVE_ORDER:
            raise InvalidPrivateKey("Derived tweak is not below the curve order")
        child = (il + self._secret) % CURVE_ORDER
        if child == 0:
            raise InvalidPrivateKey("Derived key is zero")
        return PrivateKey(child)

    def __repr__(self) -> str:
        return "PrivateKey(<secret>)"

    def __eq__(self, other) -> bool:
        if not isinstance(other, PrivateKey):
            return NotImplemented
        return self._secret == other._secret

    def __hash__(self) -> int:
        return hash(self._secret)
