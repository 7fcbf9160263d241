import argparse
import logging
import re
import sys

from .core.errors import DhCrackError
from .core.group import Group
from .core.keys import DhKey, crack_dh, dh_exchange
from .modules import discrete_log

logger = logging.getLogger(__name__)

HEX_KEY_LENGTH = 16


class _ArgumentParser(argparse.ArgumentParser):
    """Reports usage errors with exit code 1 instead of argparse's 2."""
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_and_solve(content):
    """
    Pulls p, g and h out of a challenge text and solves g^x = h (mod p).
    """
    params = {}
    for name in ("p", "g", "h"):
        match = re.search(rf'\b{name}\s*=\s*(\d+)', content)
        if not match:
            logger.warning("[-] Could not find '%s = <int>' in challenge", name)
            return None
        params[name] = int(match.group(1))

    group = Group(params["p"], params["g"])
    logger.info("[*] Parsed group p=%d g=%d", group.p, group.g)
    return discrete_log(group.g, params["h"], group.p)


def build_parser():
    parser = _ArgumentParser(
        prog="dhcrack",
        description="Recover a Diffie-Hellman private key over a group with smooth order",
        epilog="Example: dhcrack 7b074553b055f69d",
    )
    parser.add_argument("key", nargs="?", help="Public key, 16 hex chars (8 bytes little-endian)")
    parser.add_argument("--exchange", action="store_true",
                        help="Treat KEY as a private key and print its public key")
    parser.add_argument("--file", help="Challenge file with p = ..., g = ..., h = ... lines")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug output on stderr")
    return parser


def _run_key(args):
    if len(args.key) != HEX_KEY_LENGTH:
        print(f"Error: public key must be exactly {HEX_KEY_LENGTH} hex characters (8 bytes)",
              file=sys.stderr)
        return 1

    key = DhKey.from_hex_le(args.key)
    if args.exchange:
        print(dh_exchange(key).to_hex_le())
    else:
        print(crack_dh(key).to_hex_le())
    return 0


def _run_file(args):
    with open(args.file, "r") as f:
        content = f.read()

    x = parse_and_solve(content)
    if x is None:
        print("Error: failed to compute discrete logarithm", file=sys.stderr)
        return 1
    print(x)
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        stream=sys.stderr,
    )

    if (args.key is None) == (args.file is None):
        parser.error("give exactly one of KEY or --file")
    if args.file and args.exchange:
        parser.error("--exchange needs KEY, not --file")

    try:
        if args.file:
            return _run_file(args)
        return _run_key(args)
    except (DhCrackError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
