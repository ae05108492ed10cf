"""
Hierarchical deterministic wallet built from a BIP39 phrase
Ties the mnemonic codec, seed stretching and BIP32 derivation together
"""

import csv
import logging
from typing import Any, Dict, Iterable, List, Optional

from mnemokey.bip32 import ExtendedKey
from mnemokey.config import DEFAULT_STRENGTH
from mnemokey.errors import MnemokeyError
from mnemokey.language import Language
from mnemokey.mnemonic import Mnemonic
from mnemokey.path import DerivationPath
from mnemokey.seed import Seed

logger = logging.getLogger(__name__)

CSV_FIELDS = ["path", "depth", "child_number", "parent_fingerprint", "fingerprint", "public_key", "error"]


class HDWallet:
    """
    Wallet either restored from an existing phrase or freshly generated
    """

    def __init__(self, phrase: Optional[str] = None, passphrase: str = "",
                 strength: int = DEFAULT_STRENGTH, language=Language.ENGLISH):
        """
        Args:
            phrase: Optional mnemonic phrase (12-24 words); generated when omitted
            passphrase: Optional passphrase for additional security
            strength: Bit strength for phrase generation (128 for 12 words, 256 for 24 words)
            language: Wordlist language
        """
        language = Language.parse(language)
        if phrase is not None:
            self.mnemonic = Mnemonic.from_phrase(phrase, language)
        else:
            self.mnemonic = Mnemonic.generate(strength, language)

        self.seed = Seed.from_mnemonic(self.mnemonic, passphrase)
        self.master_key = ExtendedKey.from_seed(self.seed)

    @staticmethod
    def is_valid(phrase: str, language=Language.ENGLISH) -> bool:
        """Check if a mnemonic phrase is valid"""
        return Mnemonic.is_valid(phrase, language)

    @property
    def phrase(self) -> str:
        return self.mnemonic.phrase

    @property
    def entropy(self) -> bytes:
        return self.mnemonic.entropy

    def get_key(self, path) -> ExtendedKey:
        """
        Get the extended key for a derivation path

        Args:
            path: BIP32 path (e.g., "m/44'/0'/0'/0/0") or DerivationPath

        Returns:
            ExtendedKey at that path
        """
        return self.master_key.derive_path(path)

    def describe_path(self, path) -> Dict[str, Any]:
        """
        Derive one path and summarize the public parts of the result

        Failures are reported in an "error" entry instead of raising so a
        batch of paths can be processed in one pass.
        """
        try:
            derivation_path = DerivationPath.coerce(path)
            key = self.master_key.derive_path(derivation_path)
        except MnemokeyError as e:
            logger.debug("Derivation failed for %s: %s", path, type(e).__name__)
            return {"path": str(path), "error": f"{type(e).__name__}: {e}"}

        return {
            "path": str(derivation_path),
            "depth": key.depth,
            "child_number": str(key.child_number),
            "parent_fingerprint": key.parent_fingerprint.hex(),
            "fingerprint": key.fingerprint().hex(),
            "public_key": key.public_key().hex(),
        }

    def derive_paths(self, paths: Iterable) -> List[Dict[str, Any]]:
        """Summaries for several paths, in order"""
        return [self.describe_path(path) for path in paths]

    def export_csv(self, paths: Iterable, output_csv: str) -> List[Dict[str, Any]]:
        """
        Write path summaries to a CSV file

        Args:
            paths: Derivation paths to include
            output_csv: Path to the CSV file to write

        Returns:
            The rows that were written
        """
        rows = self.derive_paths(paths)
        with open(output_csv, mode='w', newline='', encoding='utf-8') as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=CSV_FIELDS)
            writer.writeheader()
            for row in rows:
                writer.writerow(row)
        logger.info("Wrote %d rows to %s", len(rows), output_csv)
        return rows
