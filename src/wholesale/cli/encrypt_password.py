"""
Encrypt a datastore password for use in configuration.

Usage:
  wholesale-encrypt 'db-password' --passphrase 'secret'
  ENCRYPTOR_PASSWORD=secret python -m wholesale.cli.encrypt_password 'db-password'

The service decrypts DATABASE_PASSWORD=ENC(...) at startup using the same
passphrase from the ENCRYPTOR_PASSWORD environment variable.
"""

import argparse
import os
import sys
from typing import Optional, Sequence

from wholesale.core.crypto import DEFAULT_ITERATIONS, PasswordEncryptor, wrap_encrypted
from wholesale.core.exceptions import CryptoError

PASSPHRASE_ENV = "ENCRYPTOR_PASSWORD"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wholesale-encrypt",
        description="Encrypt a secret for DATABASE_PASSWORD=ENC(...)",
    )
    parser.add_argument("plaintext", help="Secret to encrypt")
    parser.add_argument(
        "--passphrase",
        default=None,
        help=f"Encryption passphrase (default: ${PASSPHRASE_ENV})",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=DEFAULT_ITERATIONS,
        help=f"PBKDF2 iterations (default: {DEFAULT_ITERATIONS})",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    passphrase = args.passphrase or os.environ.get(PASSPHRASE_ENV)
    if not passphrase:
        print(f"error: no passphrase given and {PASSPHRASE_ENV} is not set", file=sys.stderr)
        return 1

    try:
        encryptor = PasswordEncryptor(passphrase, iterations=args.iterations)
        ciphertext = encryptor.encrypt(args.plaintext)
        decrypted = encryptor.decrypt(ciphertext)
    except CryptoError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    print(f"Encrypted Password: {wrap_encrypted(ciphertext)}")
    print("\nAdd this to your .env or environment:")
    print(f"DATABASE_PASSWORD={wrap_encrypted(ciphertext)}")
    if args.iterations != DEFAULT_ITERATIONS:
        print(f"ENCRYPTOR_ITERATIONS={args.iterations}")

    ok = decrypted == args.plaintext
    print(f"\nDecryption check: {'OK' if ok else 'FAILED'}")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
