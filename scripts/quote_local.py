#!/usr/bin/env python3
"""
Local price quote harness (no HTTP).

Usage:
  python3 scripts/quote_local.py basic-wash wash
  python3 scripts/quote_local.py premium-wash wash --promo first20
  python3 scripts/quote_local.py --list mechanic

Prints the breakdown through the same PricingEngine the API uses.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

load_dotenv()

from autocare.application.exceptions import ServiceNotFound, UnknownCategory  # noqa: E402
from autocare.application.utils.currency import format_price  # noqa: E402
from autocare.wiring.dependencies import get_pricing_engine  # noqa: E402


def _print_listing(category: str) -> int:
    engine = get_pricing_engine()
    for entry in engine.list_services(category):
        discount = f" (-{entry.discount_rate * 100:.0f}%)" if entry.discount_rate else ""
        print(f"{entry.service_id:<22} {format_price(entry.base_price):>8}{discount}  {entry.display_name or ''}")
    return 0


def _print_quote(service_id: str, category: str, promo: str | None) -> int:
    engine = get_pricing_engine()
    breakdown = engine.calculate_service_price(service_id, category, promo)

    print("\nPrice Breakdown")
    print("-" * 40)
    print(f"{'Service Fee':<20}{format_price(breakdown.base_price):>20}")
    if breakdown.discount > 0:
        label = f"Discount ({promo})" if promo else "Discount"
        print(f"{label:<20}{'-' + format_price(breakdown.discount):>20}")
    print(f"{'Subtotal':<20}{format_price(breakdown.subtotal):>20}")
    print(f"{'Taxes & Fees':<20}{format_price(breakdown.taxes):>20}")
    print("-" * 40)
    print(f"{'Total':<20}{format_price(breakdown.total):>20}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Print a service price breakdown.")
    parser.add_argument("service_id", nargs="?")
    parser.add_argument("category", nargs="?", default="wash")
    parser.add_argument("--promo", default=None, help="promo code, case-insensitive")
    parser.add_argument("--list", metavar="CATEGORY", default=None, help="list services of a category")
    args = parser.parse_args()

    try:
        if args.list:
            return _print_listing(args.list)
        if not args.service_id:
            parser.error("service_id is required unless --list is given")
        return _print_quote(args.service_id, args.category, args.promo)
    except (ServiceNotFound, UnknownCategory) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
