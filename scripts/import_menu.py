# scripts/import_menu.py
"""
Bulk import of sections + items from a JSON file, same rules as POST /api/import.

Usage:
  ENV=development python -m scripts.import_menu --path ./data/menu.json
  ENV=production  python -m scripts.import_menu --path ./data/menu.json
"""

import argparse
import asyncio
import json
import sys
from typing import Any

from menuboard.core.exceptions import ValidationFailed
from menuboard.db import async_session, create_db_and_tables
from menuboard.services.menu import import_menu


def load_document(path: str) -> Any:
    """Reads a JSON file; handles a UTF-8 BOM."""
    with open(path, "rb") as fb:
        raw_bytes = fb.read()
    return json.loads(raw_bytes.decode("utf-8-sig"))


# ---- CLI ----
async def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Import menu sections and items from a JSON file")
    ap.add_argument("--path", required=True, help="Path to the JSON document")
    args = ap.parse_args(argv)

    try:
        payload = load_document(args.path)
    except (OSError, ValueError) as e:
        print(f"Could not read {args.path}: {e}")
        return 1

    await create_db_and_tables()
    async with async_session() as db:
        try:
            results = await import_menu(db, payload)
        except ValidationFailed as e:
            print(f"Import rejected: {e.message}")
            return 1

    print(f"Sections: {results.sections}, Items: {results.items}, Errors: {len(results.errors)}")
    for error in results.errors[:20]:
        print(f"  {error}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        sys.exit(1)
