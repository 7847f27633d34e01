from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class BlogPost:
    slug: str
    title: str
    summary: str
    image: str
    image_alt: str
    content_html: str
