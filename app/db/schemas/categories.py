from pydantic import BaseModel
import datetime
import typing as t

from db.schemas.common import RequiredStr


class CreateCategory(BaseModel):
    name: RequiredStr
    slug: t.Optional[str] = None
    description: t.Optional[str] = None
    icon: t.Optional[str] = None
    display_order: int = 0


class UpdateCategory(BaseModel):
    name: t.Optional[RequiredStr] = None
    slug: t.Optional[RequiredStr] = None
    description: t.Optional[str] = None
    icon: t.Optional[str] = None
    display_order: t.Optional[int] = None


class CategorySummary(BaseModel):
    id: int
    name: str
    slug: str

    class Config:
        from_attributes = True


class Category(CategorySummary):
    description: t.Optional[str] = None
    icon: t.Optional[str] = None
    display_order: int
    tutorial_count: int
    created_at: t.Optional[datetime.datetime] = None
    updated_at: t.Optional[datetime.datetime] = None
