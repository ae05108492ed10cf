"""
Command-line front end: generate and check phrases, stretch seeds, derive keys
"""

import argparse
import logging
import sys
from typing import List, Optional

from mnemokey.config import DEFAULT_DERIVATION_PATHS, DEFAULT_LANGUAGE, DEFAULT_STRENGTH, ENTROPY_BITS
from mnemokey.errors import MnemokeyError
from mnemokey.language import Language
from mnemokey.logging_config import setup_logging
from mnemokey.mnemonic import Mnemonic
from mnemokey.seed import Seed
from mnemokey.wallet import HDWallet

logger = logging.getLogger(__name__)

LANGUAGE_CHOICES = [language.value for language in Language]


def cmd_generate(args) -> int:
    mnemonic = Mnemonic.generate(args.strength, args.language)
    print(mnemonic.phrase)
    return 0


def cmd_check(args) -> int:
    Mnemonic.validate(args.phrase, args.language)
    print("OK")
    return 0


def cmd_seed(args) -> int:
    mnemonic = Mnemonic.from_phrase(args.phrase, args.language)
    print(Seed.from_mnemonic(mnemonic, args.passphrase).hex())
    return 0


def cmd_derive(args) -> int:
    wallet = HDWallet(args.phrase, passphrase=args.passphrase, language=args.language)

    if args.csv:
        rows = wallet.export_csv(args.derivation_paths, args.csv)
        print(f"CSV file '{args.csv}' has been created successfully.")
    else:
        rows = wallet.derive_paths(args.derivation_paths)

    failed = False
    for row in rows:
        print(f"Derivation Path: {row['path']}")
        if "error" in row:
            failed = True
            print(f"  Error: {row['error']}")
        else:
            print(f"  Depth:              {row['depth']}")
            print(f"  Parent Fingerprint: {row['parent_fingerprint']}")
            print(f"  Fingerprint:        {row['fingerprint']}")
            print(f"  Public Key (HEX):   {row['public_key']}")
        print("-" * 70)
    return 1 if failed else 0


def cmd_complete(args) -> int:
    for word in Language.parse(args.language).word_list().get_word_by_prefix(args.prefix):
        print(word)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mnemokey",
        description="BIP39 mnemonic phrases and BIP32 key derivation.",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log derivation steps (never logs key material)"
    )
    parser.add_argument(
        "-l", "--language",
        default=DEFAULT_LANGUAGE,
        choices=LANGUAGE_CHOICES,
        help=f"Wordlist language (default: {DEFAULT_LANGUAGE})"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a new random phrase")
    generate.add_argument(
        "-s", "--strength",
        type=int,
        default=DEFAULT_STRENGTH,
        choices=ENTROPY_BITS,
        help="Entropy bits: 128 (12 words) ... 256 (24 words)"
    )
    generate.set_defaults(func=cmd_generate)

    check = subparsers.add_parser("check", help="Validate a phrase and its checksum")
    check.add_argument("phrase", help="The mnemonic phrase (e.g., \"word1 word2 ... word12\")")
    check.set_defaults(func=cmd_check)

    seed = subparsers.add_parser("seed", help="Print the 64-byte seed for a phrase")
    seed.add_argument("phrase", help="The mnemonic phrase")
    seed.add_argument(
        "-p", "--passphrase",
        default="",
        help="The passphrase associated with the mnemonic (default: empty string)"
    )
    seed.set_defaults(func=cmd_seed)

    derive = subparsers.add_parser("derive", help="Derive keys along BIP32 paths")
    derive.add_argument("phrase", help="The mnemonic phrase")
    derive.add_argument(
        "-p", "--passphrase",
        default="",
        help="The passphrase associated with the mnemonic (default: empty string)"
    )
    derive.add_argument(
        "-d", "--derivation-paths",
        nargs='+',
        default=DEFAULT_DERIVATION_PATHS,
        help="One or more BIP32 derivation paths. (See mnemokey.config for defaults)"
    )
    derive.add_argument("--csv", help="Also write the results to this CSV file")
    derive.set_defaults(func=cmd_derive)

    complete = subparsers.add_parser("complete", help="List words starting with a prefix")
    complete.add_argument("prefix", help="Leading letters of a word")
    complete.set_defaults(func=cmd_complete)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    logger.debug("Running %s command", args.command)

    try:
        return args.func(args)
    except MnemokeyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
