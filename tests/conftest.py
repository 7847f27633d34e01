import json

import pytest


@pytest.fixture
def make_blog(tmp_path):
    """Write a blog directory: ``entries`` go to blog-config.json, ``files`` map filename -> markdown."""

    def _make(entries, files=None):
        (tmp_path / "blog-config.json").write_text(json.dumps({"posts": entries}), encoding="utf-8")
        for name, text in (files or {}).items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return tmp_path

    return _make


def entry(slug, filename=None, **overrides):
    data = {
        "slug": slug,
        "title": f"Title {slug}",
        "summary": f"Summary {slug}",
        "image": f"/img/{slug}.png",
        "imageAlt": f"Alt {slug}",
        "filename": f"{slug}.md" if filename is None else filename,
    }
    data.update(overrides)
    return data


@pytest.fixture
def post_entry():
    return entry
