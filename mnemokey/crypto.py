"""
Hash primitives used by the mnemonic codec and key derivation
SHA-2, HMAC and PBKDF2 come from hashlib; RIPEMD-160 from pycryptodome
"""

import hashlib
import hmac
import unicodedata

from Crypto.Hash import RIPEMD160


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def ripemd160(data: bytes) -> bytes:
    h = RIPEMD160.new()
    h.update(data)
    return h.digest()


def hash160(data: bytes) -> bytes:
    """Perform RIPEMD160(SHA256(data))"""
    return ripemd160(sha256(data))


def hmac_sha512(key: bytes, message: bytes) -> bytes:
    return hmac.new(key, message, hashlib.sha512).digest()


def pbkdf2_hmac_sha512(password: bytes, salt: bytes, iterations: int, length: int) -> bytes:
    return hashlib.pbkdf2_hmac(
        hash_name='sha512',
        password=password,
        salt=salt,
        iterations=iterations,
        dklen=length
    )


def nfkd(text: str) -> str:
    return unicodedata.normalize('NFKD', text)
