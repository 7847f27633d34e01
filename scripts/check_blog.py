from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

BASE_DIR = Path(__file__).resolve().parent.parent

sys.path.insert(0, str(BASE_DIR))

from app import config
from app.errors import BlogLoadError
from app.services.blog_service import load_blog_service


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load a blog directory and list the posts it would serve.")
    parser.add_argument("--blog-dir", type=Path, default=config.BLOG_DIR, help="Directory holding blog-config.json")
    parser.add_argument("--verbose", action="store_true", help="Trace every file read.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        service = load_blog_service(args.blog_dir)
    except BlogLoadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for post in sorted(service.posts(), key=lambda item: item.slug):
        print(f"{post.slug}\t{post.title}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
