from __future__ import annotations

import os
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_BLOG_DIR = BASE_DIR / "content"
BLOG_DIR = Path(os.getenv("BLOG_CONTENT_DIR", str(DEFAULT_BLOG_DIR))).expanduser()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
