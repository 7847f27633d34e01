from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class PostEntry(BaseModel):
    """One item of the ``posts`` array in ``blog-config.json``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    slug: StrictStr = ""
    title: StrictStr = ""
    summary: StrictStr = ""
    image: StrictStr = ""
    image_alt: StrictStr = Field(default="", alias="imageAlt")
    # Relative to the blog directory.
    filename: StrictStr = ""


class BlogConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    posts: List[PostEntry] = Field(default_factory=list)
