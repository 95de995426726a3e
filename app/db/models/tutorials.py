from sqlalchemy import Column, Integer, String, JSON, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from db.session import Base
from db.models.categories import Category
from db.models.tags import Tag, tutorial_tags

DIFFICULTIES = ("easy", "medium", "hard")
STATUSES = ("draft", "published")

# TUTORIAL MODEL


class Tutorial(Base):
    __tablename__ = "tutorials"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(String)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), index=True)
    difficulty = Column(String, nullable=False, default="easy", index=True)
    problem_statement = Column(String)
    input_format = Column(String)
    output_format = Column(String)
    constraints = Column(String)
    examples = Column(JSON, nullable=False, default=list)
    solutions = Column(JSON, nullable=False, default=dict)
    approach = Column(String)
    time_complexity = Column(String)
    space_complexity = Column(String)
    featured_image_url = Column(String)
    views = Column(Integer, nullable=False, default=0)
    status = Column(String, nullable=False, default="draft", index=True)
    published_at = Column(DateTime(timezone=True), index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    category = relationship(Category, lazy="joined")
    tags = relationship(Tag, secondary=tutorial_tags, order_by=Tag.name, lazy="selectin")
