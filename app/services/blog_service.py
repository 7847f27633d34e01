from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from markdown_it import MarkdownIt

from app.errors import PostSourceNotFound
from app.models.post import BlogPost
from app.services.manifest_loader import load_manifest


logger = logging.getLogger(__name__)

_markdown = MarkdownIt("commonmark")


class BlogService:
    """Read-only view over the posts materialized from a blog directory.

    Instances are built by :func:`load_blog_service` and never change after
    construction, so they can be shared between request handlers freely.
    """

    def __init__(self, blog_dir: Path, posts: Dict[str, BlogPost]) -> None:
        self.blog_dir = blog_dir
        self._posts = dict(posts)

    def posts(self) -> List[BlogPost]:
        """Return every post. Order is not guaranteed."""
        return list(self._posts.values())

    def post_by_slug(self, slug: str) -> Optional[BlogPost]:
        return self._posts.get(slug)

    def __len__(self) -> int:
        return len(self._posts)

    def __contains__(self, slug: object) -> bool:
        return slug in self._posts


def render_markdown(raw: bytes) -> str:
    text = raw.decode("utf-8", errors="replace")
    return _markdown.render(text)


def load_blog_service(blog_dir: Union[str, Path], log: Optional[logging.Logger] = None) -> BlogService:
    """Load the manifest and every post it references.

    Raises ``ConfigNotFound``, ``ConfigInvalid`` or ``PostSourceNotFound``; a
    single unreadable post aborts the whole load.
    """
    log = log or logger
    blog_dir = Path(blog_dir)
    entries = load_manifest(blog_dir, log)

    posts: Dict[str, BlogPost] = {}
    for entry in entries:
        # Absolute-looking names resolve under the blog directory.
        path = blog_dir / entry.filename.lstrip("/\\")
        log.debug("Loading blog post %s (slug=%s, title=%s)", path, entry.slug, entry.title)

        try:
            raw = path.read_bytes()
        except OSError as exc:
            log.debug("Unable to load blog post markdown %s (slug=%s): %s", path, entry.slug, exc)
            raise PostSourceNotFound(path, entry.slug) from exc

        if entry.slug in posts:
            log.warning("Duplicate slug '%s' in blog config, %s replaces the earlier post", entry.slug, path)

        posts[entry.slug] = BlogPost(
            slug=entry.slug,
            title=entry.title,
            summary=entry.summary,
            image=entry.image,
            image_alt=entry.image_alt,
            content_html=render_markdown(raw),
        )

    log.info("Loaded %d blog posts from %s", len(posts), blog_dir)
    return BlogService(blog_dir, posts)
