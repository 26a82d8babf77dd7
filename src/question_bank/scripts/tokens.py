"""Mint a bearer token for a voter id.

Authentication is normally handled by the upstream identity provider; this
helper signs tokens with the local SECRET_KEY for operators and smoke tests.

Usage:
    python -m question_bank.scripts.tokens 42 --minutes 60
"""

import argparse
import sys

from question_bank.core.security import create_access_token


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a signed access token.")
    parser.add_argument("voter_id", type=int, help="Voter id placed in the token subject")
    parser.add_argument("--minutes", type=int, default=None, help="Token lifetime in minutes")
    args = parser.parse_args(argv)

    print(create_access_token(args.voter_id, expires_minutes=args.minutes))
    return 0


if __name__ == "__main__":
    sys.exit(main())
