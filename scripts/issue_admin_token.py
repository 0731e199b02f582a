#!/usr/bin/env python3
"""Issue an admin session token for the invitation API."""

import argparse
import sys
from datetime import timedelta

import logfire

from joinlink.config import Settings
from joinlink.util.jwt import create_token
from joinlink.util.observability import configure_logfire


def main() -> int:
    """Print a signed admin token to stdout."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("email", help="Admin email, checked against AUTH__ADMIN_EMAILS")
    parser.add_argument("--subject", default=None, help="Token subject (defaults to email)")
    parser.add_argument("--hours", type=int, default=12, help="Token lifetime in hours")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    if settings.auth.admin_emails and args.email not in settings.auth.admin_emails:
        logfire.warn("Issuing token for an email outside the admin list", email=args.email)

    token = create_token(
        args.subject or args.email,
        args.email,
        settings.auth,
        expires_in=timedelta(hours=args.hours),
    )
    logfire.info("Admin token issued", email=args.email, hours=args.hours)
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
