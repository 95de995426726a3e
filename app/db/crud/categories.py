from fastapi import HTTPException, status
from sqlalchemy.orm import Session
import typing as t

from db.models import categories as models
from db.models.tutorials import Tutorial
from db.schemas import categories as schemas
from db.session import commit
from utils.slug import slug_for


######################################
### CRUD OPERATIONS FOR CATEGORIES ###
######################################

def get_category(db: Session, id: int):
    category = db.query(models.Category).filter(models.Category.id == id).first()
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="category not found")
    return category


def get_category_by_slug(db: Session, slug: str):
    category = db.query(models.Category).filter(models.Category.slug == slug).first()
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="category not found")
    return category


def get_categories(
    db: Session, skip: int = 0, limit: int = 100
) -> t.List[schemas.Category]:
    return db.query(models.Category).order_by(
        models.Category.display_order, models.Category.name).offset(skip).limit(limit).all()


def get_category_ids(db: Session, slugs: t.List[str]) -> t.List[int]:
    return [id for (id,) in db.query(models.Category.id).filter(models.Category.slug.in_(slugs))]


def count_categories(db: Session) -> int:
    return db.query(models.Category).count()


def create_category(db: Session, category: schemas.CreateCategory):
    db_category = models.Category(
        name=category.name,
        slug=slug_for(category.name, category.slug),
        description=category.description,
        icon=category.icon,
        display_order=category.display_order,
        tutorial_count=0,
    )
    db.add(db_category)
    commit(db)
    db.refresh(db_category)
    return db_category


def edit_category(db: Session, id: int, category: schemas.UpdateCategory):
    db_category = get_category(db, id)

    update_data = category.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(db_category, key, value)

    db.add(db_category)
    commit(db)
    db.refresh(db_category)
    return db_category


def delete_category(db: Session, id: int):
    category = get_category(db, id)
    # tutorials survive their category
    db.query(Tutorial).filter(Tutorial.category_id == category.id).update(
        {Tutorial.category_id: None}, synchronize_session=False)
    db.delete(category)
    commit(db)
