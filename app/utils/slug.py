import re

from fastapi import HTTPException, status


def generate_slug(name: str) -> str:
    # Two Pointers & Sliding Window -> two-pointers-sliding-window
    slug = re.sub(r'[^a-z0-9\s-]', '', name.lower())
    slug = re.sub(r'\s+', '-', slug.strip())
    return re.sub(r'-+', '-', slug).strip('-')


def slug_for(name: str, slug: str = None) -> str:
    slug = (slug or '').strip() or generate_slug(name)
    if not slug:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="slug cannot be generated from name, supply one")
    return slug


def split_csv(value: str) -> list:
    # "easy,,medium " -> ["easy", "medium"]
    if not value:
        return []
    return [item.strip() for item in value.split(',') if item.strip()]
