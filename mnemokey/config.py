"""
Protocol constants and library defaults
"""

# BIP39
ENTROPY_BITS = (128, 160, 192, 224, 256)
ENTROPY_BYTES = tuple(bits // 8 for bits in ENTROPY_BITS)
WORD_COUNTS = (12, 15, 18, 21, 24)
WORD_BITS = 11
WORDLIST_SIZE = 2048

# Seed stretching
SEED_BYTES = 64
SEED_SALT_PREFIX = "mnemonic"
PBKDF2_ROUNDS = 2048

# BIP32
MASTER_HMAC_KEY = b"Bitcoin seed"
HARDENED_OFFSET = 0x80000000
MAX_DEPTH = 255
CHAIN_CODE_BYTES = 32
FINGERPRINT_BYTES = 4

# Serialization version bytes (mainnet)
XPRV_VERSION = 0x0488ADE4
XPUB_VERSION = 0x0488B21E
# Testnet
TPRV_VERSION = 0x04358394
TPUB_VERSION = 0x043587CF

DEFAULT_LANGUAGE = "english"
DEFAULT_STRENGTH = 128

DEFAULT_DERIVATION_PATHS = [
    "m/44'/0'/0'/0/0",  # BIP44
    "m/44'/0'/0'/0/1",
    "m/49'/0'/0'/0/0",  # BIP49
    "m/84'/0'/0'/0/0",  # BIP84
    "m/86'/0'/0'/0/0",  # BIP86
    "m/0/0",
    "m/0/1",
]
