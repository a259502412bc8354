#!/usr/bin/env python3
"""Issue a bearer token for a client of the tags API.

Usage:
    AUTH__JWT_SECRET=... python scripts/issue_token.py android-reader-01
"""

import argparse
import sys

from waresys.config import Settings
from waresys.domain.service import JWTService
from waresys.util.observability import configure_logfire


def main() -> int:
    """Print a signed token for the given client name."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("subject", help="Client or user the token is issued to")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    jwt_service = JWTService(auth_settings=settings.auth)
    print(jwt_service.create_token(args.subject))
    return 0


if __name__ == "__main__":
    sys.exit(main())
