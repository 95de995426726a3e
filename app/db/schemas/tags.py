from pydantic import BaseModel
import datetime
import typing as t

from db.schemas.common import RequiredStr


class CreateTag(BaseModel):
    name: RequiredStr
    slug: t.Optional[str] = None


class UpdateTag(BaseModel):
    name: t.Optional[RequiredStr] = None
    slug: t.Optional[RequiredStr] = None


class TagSummary(BaseModel):
    id: int
    name: str
    slug: str

    class Config:
        from_attributes = True


class Tag(TagSummary):
    tutorial_count: int
    created_at: t.Optional[datetime.datetime] = None
