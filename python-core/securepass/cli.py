#!/usr/bin/env python3
"""
SecurePass Command Line Interface

Usage:
    securepass [PARAMETERS] hash [--password PW] [--encoded]
    securepass [PARAMETERS] verify --salt S --key K [--password PW]
    securepass [PARAMETERS] verify --encoded RECORD [--password PW]
    securepass algorithms
    securepass --version

Exit codes:
    0  success / password matches
    1  password does not match
    2  invalid input or parameters
"""

import argparse
import getpass
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import HasherConfig
from .errors import SecurePassError
from .hasher import PasswordHasher
from .kdf import supported_algorithms

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2


class SecurePassCLI:
    """Main CLI application for SecurePass."""

    def run(self, args: List[str]) -> int:
        """Run the CLI with given arguments and return the exit code."""
        parser = self.create_parser()
        parsed = parser.parse_args(args)

        logging.basicConfig(
            level=logging.DEBUG if parsed.verbose else logging.WARNING,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        if not hasattr(parsed, "func"):
            parser.print_help()
            return EXIT_OK

        try:
            return parsed.func(parsed)
        except SecurePassError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_ERROR

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser."""
        parser = argparse.ArgumentParser(
            prog="securepass",
            description="Salted PBKDF2 password hashing",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
    securepass hash --password Test_Password
    securepass --iterations 100000 hash --encoded
    securepass verify --salt <salt> --key <key>
    securepass verify --encoded '$PBKDF2WithHmacSHA512$50000$64$512$...'
            """
        )

        parser.add_argument(
            "--version",
            action="version",
            version=f"SecurePass v{__version__}"
        )
        parser.add_argument("--verbose", "-v", action="store_true",
                            help="Enable debug logging")
        parser.add_argument("--algorithm", "-a", default=HasherConfig.DEFAULT_ALGORITHM,
                            help="PBKDF2 algorithm identifier")
        parser.add_argument("--key-length", type=int, default=HasherConfig.DEFAULT_KEY_LENGTH,
                            help="Key length in bits, salt excluded")
        parser.add_argument("--salt-length", type=int, default=HasherConfig.DEFAULT_SALT_LENGTH,
                            help="Salt length in bits")
        parser.add_argument("--iterations", "-n", type=int, default=HasherConfig.DEFAULT_ITERATIONS,
                            help="PBKDF2 iteration count")

        subparsers = parser.add_subparsers(title="commands", dest="command")

        self.add_hash_command(subparsers)
        self.add_verify_command(subparsers)
        self.add_algorithms_command(subparsers)

        return parser

    def add_hash_command(self, subparsers):
        """Add hash command to parser."""
        cmd = subparsers.add_parser("hash", help="Hash a new password")
        cmd.add_argument("--password", "-p", help="Password (prompted if omitted)")
        cmd.add_argument("--encoded", "-e", action="store_true",
                         help="Print one self-describing record instead of salt and key")
        cmd.set_defaults(func=self.handle_hash)

    def add_verify_command(self, subparsers):
        """Add verify command to parser."""
        cmd = subparsers.add_parser("verify", help="Check a password against a stored record")
        cmd.add_argument("--password", "-p", help="Password (prompted if omitted)")
        cmd.add_argument("--salt", "-s", help="Stored base64 salt")
        cmd.add_argument("--key", "-k", help="Stored base64 derived key")
        cmd.add_argument("--encoded", "-e", help="Stored self-describing record")
        cmd.set_defaults(func=self.handle_verify)

    def add_algorithms_command(self, subparsers):
        """Add algorithms command to parser."""
        cmd = subparsers.add_parser("algorithms", help="List supported algorithm identifiers")
        cmd.set_defaults(func=self.handle_algorithms)

    def build_hasher(self, args) -> PasswordHasher:
        config = HasherConfig(
            algorithm=args.algorithm,
            key_length=args.key_length,
            salt_length=args.salt_length,
            iterations=args.iterations,
        )
        config.validate()
        return PasswordHasher(config)

    @staticmethod
    def read_password(args) -> str:
        if args.password is not None:
            return args.password
        return getpass.getpass("Password: ")

    # Command handlers

    def handle_hash(self, args):
        """Handle hash command."""
        hasher = self.build_hasher(args)
        password = self.read_password(args)

        if args.encoded:
            print(hasher.hash_to_string(password))
        else:
            record = hasher.compute_hash(password)
            print(record.salt)
            print(record.derived_key)
        return EXIT_OK

    def handle_verify(self, args):
        """Handle verify command."""
        if args.encoded is None and (args.salt is None or args.key is None):
            print("Error: verify needs --encoded, or both --salt and --key", file=sys.stderr)
            return EXIT_ERROR
        if args.encoded is not None and (args.salt is not None or args.key is not None):
            print("Error: --encoded cannot be combined with --salt or --key", file=sys.stderr)
            return EXIT_ERROR

        hasher = self.build_hasher(args)
        password = self.read_password(args)

        if args.encoded is not None:
            matched = hasher.verify_string(password, args.encoded)
        else:
            matched = hasher.authenticate(password, args.salt, args.key)

        if matched:
            print("authentication: SUCCESS")
            return EXIT_OK

        logger.warning("Password verification failed")
        print("authentication: FAILED")
        return EXIT_MISMATCH

    def handle_algorithms(self, args):
        """Handle algorithms command."""
        for name in supported_algorithms():
            print(name)
        return EXIT_OK


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    cli = SecurePassCLI()
    sys.exit(cli.run(sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":
    main()
