#!/usr/bin/env python3
"""
Print the service catalog as the services page would group it.

Usage:
  python3 scripts/preview_catalog.py            # uses CONTENT_PROVIDER from .env
  CONTENT_PROVIDER=mock python3 scripts/preview_catalog.py
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.utils.presentation import excerpt
from app.wiring.dependencies import get_list_services_use_case


def main() -> int:
    listing = get_list_services_use_case().execute()
    if listing.error:
        print(f"❌ {listing.error}")
        return 1
    if not listing.services:
        print("Услуги не найдены")
        return 0

    for group in listing.groups:
        print(f"\n{group.letter_key}")
        print("-" * 40)
        for service in group.members:
            print(f"  {service.title} (/services/{service.slug})")
            print(f"    {excerpt(service.description)}")

    print(f"\n✅ {len(listing.services)} services in {len(listing.groups)} groups")
    return 0


if __name__ == "__main__":
    sys.exit(main())
