"""
Logging configuration
Derivation events are logged but never include key material
"""

import logging
import sys
from typing import Set


class SecretFilter(logging.Filter):
    """Filter that redacts records which look like they carry secrets"""

    SENSITIVE_KEYS: Set[str] = {
        "entropy",
        "phrase",
        "mnemonic",
        "passphrase",
        "seed",
        "private",
        "chain_code",
        "xprv",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage().lower()
        for key in self.SENSITIVE_KEYS:
            if key in msg and "=" in msg:
                # Likely contains sensitive value assignment
                record.msg = "[REDACTED - Sensitive data filtered]"
                record.args = ()
                break
        return True


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for command-line use"""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretFilter())

    logger = logging.getLogger("mnemokey")
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    logger.handlers = []
    logger.addHandler(handler)
    logger.propagate = False
