"""
Smoke check: query database statistics from the live Clearspending service.

Usage examples:
  python -m scripts.db_info_smoke
  python -m scripts.db_info_smoke --info all --base-url http://openapi.clearspending.ru/restapi/v3
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from dotenv import load_dotenv

from clearspending import ClearspendingClient, ClearspendingError, ClientConfig
from clearspending.config import DEFAULT_BASE_URL


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Query Clearspending database statistics")
    parser.add_argument("--info", default="all", help="Statistics section (default: all)")
    parser.add_argument(
        "--base-url",
        default=os.getenv("CLEARSPENDING_BASE_URL", DEFAULT_BASE_URL),
        help="API base URL (default: $CLEARSPENDING_BASE_URL or the public service)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log request details")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    with ClearspendingClient(ClientConfig(base_url=args.base_url)) as client:
        try:
            result = client.db_info(info=args.info)
        except ClearspendingError as e:
            logging.error(f"db_info failed: {e.error}")
            return 1

    print(json.dumps(result, ensure_ascii=False, indent=2))
    if isinstance(result, dict) and result.get("total") != 1:
        print(f"Unexpected total: {result.get('total')!r}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
