from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from app.schemas.post import PostResponse
from app.services.blog_service import BlogService


router = APIRouter(prefix="/api")


def get_blog_service(request: Request) -> BlogService:
    return request.app.state.blog_service


@router.get("/posts", response_model=List[PostResponse], name="list_posts")
def list_posts(service: BlogService = Depends(get_blog_service)) -> List[PostResponse]:
    return [PostResponse.from_post(post) for post in service.posts()]


@router.get("/posts/{slug}", response_model=PostResponse, name="post_detail")
def post_detail(slug: str, service: BlogService = Depends(get_blog_service)) -> PostResponse:
    post = service.post_by_slug(slug)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return PostResponse.from_post(post)
