"""Send a quote request or creator registration through the inquiry relay."""

import argparse
import json
import logging
import sys

from marshmallow import ValidationError

from ugc_relay.config import Config
from ugc_relay.inquiry import RelayClient, build_mailto, format_creator_registration, format_quote_request
from ugc_relay.serializer import BUDGET_OPTIONS

QUOTE_FIELDS = ("name", "email", "brand", "budget", "needs")
CREATOR_FIELDS = ("firstName", "lastName", "email", "country", "dob", "instagram", "tiktok", "links",
                  "permission", "subscribe")


def build_parser():
    parser = argparse.ArgumentParser(
        description="Send an Apex UGC inquiry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Ask for a quote through the relay
  %(prog)s quote --name "Jane Doe" --email jane@brand.com --needs "1 TikTok ad"

  # Print a mailto: link for a creator registration instead of sending it
  %(prog)s --mailto creator --first-name Jane --last-name Doe --email jane@example.com
        """,
    )
    parser.add_argument("--relay-url", default=Config.RELAY_URL, help="Base URL of the relay service")
    parser.add_argument("--mailto", action="store_true", help="Print a mailto: link instead of posting")

    subparsers = parser.add_subparsers(dest="command", help="Form to submit")

    quote_parser = subparsers.add_parser("quote", help="Brand quote request")
    quote_parser.add_argument("--name", required=True)
    quote_parser.add_argument("--email", required=True)
    quote_parser.add_argument("--brand")
    quote_parser.add_argument("--budget", choices=BUDGET_OPTIONS)
    quote_parser.add_argument("--needs", required=True)

    creator_parser = subparsers.add_parser("creator", help="UGC creator registration")
    creator_parser.add_argument("--first-name", dest="firstName", required=True)
    creator_parser.add_argument("--last-name", dest="lastName", required=True)
    creator_parser.add_argument("--email", required=True)
    creator_parser.add_argument("--country")
    creator_parser.add_argument("--dob", help="Date of birth, YYYY-MM-DD")
    creator_parser.add_argument("--instagram")
    creator_parser.add_argument("--tiktok")
    creator_parser.add_argument("--links", help="Links to assets or UGC examples")
    creator_parser.add_argument("--permission", action="store_true",
                                help="Agree to marketing use of submitted assets")
    creator_parser.add_argument("--subscribe", action="store_true", help="Subscribe to creator updates")
    return parser


def _form_data(args, names):
    return {name: getattr(args, name) for name in names if getattr(args, name) is not None}


def main(argv=None):
    logging.basicConfig(level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO))

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    try:
        if args.command == "quote":
            inquiry = format_quote_request(_form_data(args, QUOTE_FIELDS))
        else:
            inquiry = format_creator_registration(_form_data(args, CREATOR_FIELDS))
    except ValidationError as err:
        print(json.dumps({"success": False, "error": err.messages}), file=sys.stderr)
        return 1

    if args.mailto:
        print(build_mailto(inquiry))
        return 0

    result = RelayClient(args.relay_url).submit(inquiry)
    print(json.dumps(result.envelope))
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
