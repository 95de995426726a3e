from pydantic import BaseModel
import datetime
import typing as t

from db.schemas.categories import Category, CategorySummary
from db.schemas.common import RequiredStr
from db.schemas.tags import Tag, TagSummary

Difficulty = t.Literal["easy", "medium", "hard"]
Status = t.Literal["draft", "published"]

### SCHEMAS FOR TUTORIALS ###


class Example(BaseModel):
    input: str
    output: str
    explanation: t.Optional[str] = None


class Solution(BaseModel):
    code: str
    explanation: t.Optional[str] = None
    time_complexity: t.Optional[str] = None
    space_complexity: t.Optional[str] = None


class CreateTutorial(BaseModel):
    title: RequiredStr
    slug: RequiredStr
    description: t.Optional[str] = None
    category_id: t.Optional[int] = None
    difficulty: Difficulty = "easy"
    problem_statement: t.Optional[str] = None
    input_format: t.Optional[str] = None
    output_format: t.Optional[str] = None
    constraints: t.Optional[str] = None
    examples: t.List[Example] = []
    solutions: t.Dict[str, Solution] = {}
    approach: t.Optional[str] = None
    time_complexity: t.Optional[str] = None
    space_complexity: t.Optional[str] = None
    featured_image_url: t.Optional[str] = None
    status: Status = "draft"
    published_at: t.Optional[datetime.datetime] = None
    # tag slugs
    tags: t.Optional[t.List[str]] = None


class UpdateTutorial(BaseModel):
    title: t.Optional[RequiredStr] = None
    slug: t.Optional[RequiredStr] = None
    description: t.Optional[str] = None
    category_id: t.Optional[int] = None
    difficulty: t.Optional[Difficulty] = None
    problem_statement: t.Optional[str] = None
    input_format: t.Optional[str] = None
    output_format: t.Optional[str] = None
    constraints: t.Optional[str] = None
    examples: t.Optional[t.List[Example]] = None
    solutions: t.Optional[t.Dict[str, Solution]] = None
    approach: t.Optional[str] = None
    time_complexity: t.Optional[str] = None
    space_complexity: t.Optional[str] = None
    featured_image_url: t.Optional[str] = None
    status: t.Optional[Status] = None
    published_at: t.Optional[datetime.datetime] = None
    tags: t.Optional[t.List[str]] = None


class Tutorial(BaseModel):
    id: int
    title: str
    slug: str
    description: t.Optional[str] = None
    category_id: t.Optional[int] = None
    difficulty: Difficulty
    problem_statement: t.Optional[str] = None
    input_format: t.Optional[str] = None
    output_format: t.Optional[str] = None
    constraints: t.Optional[str] = None
    examples: t.List[Example] = []
    solutions: t.Dict[str, Solution] = {}
    approach: t.Optional[str] = None
    time_complexity: t.Optional[str] = None
    space_complexity: t.Optional[str] = None
    featured_image_url: t.Optional[str] = None
    views: int
    status: Status
    published_at: t.Optional[datetime.datetime] = None
    created_at: t.Optional[datetime.datetime] = None
    updated_at: t.Optional[datetime.datetime] = None
    category: t.Optional[CategorySummary] = None
    tags: t.List[TagSummary] = []

    class Config:
        from_attributes = True


class TutorialListItem(BaseModel):
    id: int
    title: str
    slug: str
    status: Status
    views: int
    difficulty: Difficulty
    created_at: t.Optional[datetime.datetime] = None
    category: t.Optional[CategorySummary] = None

    class Config:
        from_attributes = True


class CategoryDetails(BaseModel):
    category: Category
    tutorials: t.List[Tutorial]


class TagDetails(BaseModel):
    tag: Tag
    tutorials: t.List[Tutorial]


class LevelCounts(BaseModel):
    easy: int = 0
    medium: int = 0
    hard: int = 0


class HomeStats(BaseModel):
    totalProblems: int
    totalCategories: int
    totalTopics: int


class Home(BaseModel):
    featured: t.List[Tutorial]
    recent: t.List[Tutorial]
    categories: t.List[Category]
    stats: HomeStats


class AdminStats(BaseModel):
    totalTutorials: int
    publishedTutorials: int
    totalCategories: int
    totalTags: int
    totalViews: int
    recent: t.List[TutorialListItem]
