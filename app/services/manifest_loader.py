from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from app.errors import ConfigInvalid, ConfigNotFound
from app.models.manifest import BlogConfig, PostEntry


logger = logging.getLogger(__name__)

BLOG_CONFIG_FILENAME = "blog-config.json"


def load_manifest(blog_dir: Union[str, Path], log: Optional[logging.Logger] = None) -> List[PostEntry]:
    """Read ``blog-config.json`` from ``blog_dir`` and return its entries in manifest order."""
    log = log or logger
    config_path = Path(blog_dir) / BLOG_CONFIG_FILENAME
    log.debug("Reading blog config file %s", config_path)

    try:
        raw = config_path.read_bytes()
    except OSError as exc:
        log.debug("Unable to read blog config file %s: %s", config_path, exc)
        raise ConfigNotFound(config_path) from exc

    try:
        config = BlogConfig.model_validate_json(raw)
    except ValidationError as exc:
        log.debug("Blog config file %s found, but invalid", config_path)
        raise ConfigInvalid(config_path, _describe(exc)) from exc

    return list(config.posts)


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return f"{location}: {first.get('msg', 'invalid value')}"
