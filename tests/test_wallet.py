import csv

import pytest

from mnemokey.bip32 import ExtendedKey
from mnemokey.errors import InvalidChecksum, InvalidWordCount
from mnemokey.mnemonic import Mnemonic
from mnemokey.seed import Seed
from mnemokey.wallet import HDWallet

from conftest import TREZOR_SEED, ZERO_PHRASE


def test_wallet_from_phrase():
    wallet = HDWallet(ZERO_PHRASE, passphrase="TREZOR")
    assert wallet.phrase == ZERO_PHRASE
    assert wallet.entropy == bytes(16)
    assert wallet.seed.hex() == TREZOR_SEED
    assert wallet.master_key == ExtendedKey.from_seed(Seed.fromhex(TREZOR_SEED))


@pytest.mark.parametrize("strength,words", [(128, 12), (256, 24)])
def test_wallet_generates_phrase(strength, words):
    wallet = HDWallet(strength=strength)
    assert len(wallet.phrase.split()) == words
    assert HDWallet.is_valid(wallet.phrase)


def test_wallet_rejects_invalid_phrase():
    with pytest.raises(InvalidChecksum):
        HDWallet(" ".join(["abandon"] * 12))


def test_get_key_matches_manual_derivation():
    wallet = HDWallet(ZERO_PHRASE)
    seed = Seed.from_mnemonic(Mnemonic.from_phrase(ZERO_PHRASE))
    expected = ExtendedKey.from_seed(seed).derive_path("m/44'/0'/0'/0/0")
    assert wallet.get_key("m/44'/0'/0'/0/0") == expected


def test_describe_path():
    wallet = HDWallet(ZERO_PHRASE)
    row = wallet.describe_path("m/44h/0h/0h/0/0")
    key = wallet.get_key("m/44'/0'/0'/0/0")

    assert row["path"] == "m/44'/0'/0'/0/0"
    assert row["depth"] == 5
    assert row["child_number"] == "0"
    assert row["public_key"] == key.public_key().hex()
    assert row["fingerprint"] == key.fingerprint().hex()
    assert "error" not in row


def test_derive_paths_reports_errors_and_continues():
    wallet = HDWallet(ZERO_PHRASE)
    rows = wallet.derive_paths(["m/0", "m/bogus", "m/1"])
    assert [row["path"] for row in rows] == ["m/0", "m/bogus", "m/1"]
    assert "error" in rows[1]
    assert rows[1]["error"].startswith("InvalidDerivationPath")
    assert "error" not in rows[0]
    assert "error" not in rows[2]


def test_export_csv(tmp_path):
    wallet = HDWallet(ZERO_PHRASE)
    output = tmp_path / "keys.csv"
    rows = wallet.export_csv(["m/0", "m/0'/1"], str(output))

    with open(output, newline="", encoding="utf-8") as f:
        written = list(csv.DictReader(f))

    assert len(written) == 2
    assert written[0]["path"] == "m/0"
    assert written[1]["public_key"] == rows[1]["public_key"]
    assert written[1]["depth"] == "2"


def test_wallet_rejects_empty_phrase():
    with pytest.raises(InvalidWordCount):
        HDWallet("")


def test_describe_path_reports_non_ascii_digits():
    wallet = HDWallet(ZERO_PHRASE)
    row = wallet.describe_path("m/0/²")
    assert row["error"].startswith("InvalidDerivationPath")
