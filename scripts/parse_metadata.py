#!/usr/bin/env python3
"""Print the metadata record of a webpage or a local HTML file."""

import asyncio
import json
import sys
from pathlib import Path
import argparse

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from modules.metadata_extractor import MetadataExtractor
from shared.exceptions import DevToolsException
from loguru import logger


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Extract title, meta tags, links and JSON-LD from a webpage")
    parser.add_argument(
        "url",
        help="URL of the page (recorded as-is when --file is given)"
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="Parse this HTML file instead of fetching the URL"
    )

    args = parser.parse_args()
    extractor = MetadataExtractor()

    try:
        if args.file:
            record = extractor.parse(args.file.read_text(encoding="utf-8"), args.url)
        else:
            record = asyncio.run(extractor.extract(args.url))
    except DevToolsException as e:
        logger.error(e.message)
        return 1

    print(json.dumps(record.to_wire(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
