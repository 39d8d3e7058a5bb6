"""
Static build — write llms.txt and llms-full.txt next to a generated site.

Runs the same pipeline as the HTTP endpoints against a docs directory and
writes both exports as UTF-8 files.

Usage:
    llmstxt-build --content-dir src/content/docs --out-dir dist
    llmstxt-build --content-dir docs --out-dir public --site https://preview.example.com
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import anyio

from llmstxt.export.pipeline import export_full, export_index
from llmstxt.models import ExportSettings
from llmstxt.site import load_export_settings
from llmstxt.storage import DEFAULT_CONTENT_DIR, ContentStore, LocalContentStore

logger = logging.getLogger("llmstxt.build")

INDEX_FILENAME = "llms.txt"
FULL_FILENAME = "llms-full.txt"


async def build_exports(
    store: ContentStore,
    settings: ExportSettings,
    out_dir: Path,
) -> list[Path]:
    """Render both exports and write them into *out_dir*.  Returns the written paths."""
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for filename, export in ((INDEX_FILENAME, export_index), (FULL_FILENAME, export_full)):
        doc = await export(store, settings)
        path = out_dir / filename
        # newline="" keeps '\n' line endings on every platform
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(doc.content)
        logger.info("Wrote %s (%d bytes)", path, len(doc.content.encode("utf-8")))
        written.append(path)
    return written


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="llmstxt-build",
        description="Write llms.txt and llms-full.txt from a docs directory.",
    )
    parser.add_argument(
        "--content-dir",
        default=DEFAULT_CONTENT_DIR,
        help=f"Docs directory with .md/.mdx pages (default: {DEFAULT_CONTENT_DIR})",
    )
    parser.add_argument(
        "--out-dir",
        default="dist",
        help="Directory to write the exports into (default: dist)",
    )
    parser.add_argument(
        "--site",
        default=None,
        help="Site origin for page links (default: $LLMSTXT_SITE or the production docs)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    store = LocalContentStore(base_path=args.content_dir)
    settings = load_export_settings(site_origin=args.site)

    try:
        anyio.run(build_exports, store, settings, Path(args.out_dir))
    except OSError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
