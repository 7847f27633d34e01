from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.models.post import BlogPost


class PostResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    slug: str
    title: str
    summary: str
    image: str
    image_alt: str = Field(alias="imageAlt")
    html_content: str = Field(alias="htmlContent")

    @classmethod
    def from_post(cls, post: BlogPost) -> "PostResponse":
        return cls(
            slug=post.slug,
            title=post.title,
            summary=post.summary,
            image=post.image,
            image_alt=post.image_alt,
            html_content=post.content_html,
        )
