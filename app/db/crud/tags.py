from fastapi import HTTPException, status
from sqlalchemy.orm import Session
import typing as t

from db.models import tags as models
from db.schemas import tags as schemas
from db.session import commit
from utils.slug import slug_for


################################
### CRUD OPERATIONS FOR TAGS ###
################################

def get_tag(db: Session, id: int):
    tag = db.query(models.Tag).filter(models.Tag.id == id).first()
    if not tag:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="tag not found")
    return tag


def get_tag_by_slug(db: Session, slug: str):
    tag = db.query(models.Tag).filter(models.Tag.slug == slug).first()
    if not tag:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="tag not found")
    return tag


def get_tags(db: Session, sort: str = 'popular') -> t.List[schemas.Tag]:
    if sort == 'name':
        return db.query(models.Tag).order_by(models.Tag.name).all()
    return db.query(models.Tag).order_by(models.Tag.tutorial_count.desc(), models.Tag.name).all()


def get_tag_ids(db: Session, slugs: t.List[str]) -> t.List[int]:
    return [id for (id,) in db.query(models.Tag.id).filter(models.Tag.slug.in_(slugs))]


def count_tags(db: Session) -> int:
    return db.query(models.Tag).count()


def create_tag(db: Session, tag: schemas.CreateTag):
    db_tag = models.Tag(
        name=tag.name,
        slug=slug_for(tag.name, tag.slug),
        tutorial_count=0,
    )
    db.add(db_tag)
    commit(db)
    db.refresh(db_tag)
    return db_tag


def edit_tag(db: Session, id: int, tag: schemas.UpdateTag):
    db_tag = get_tag(db, id)

    update_data = tag.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(db_tag, key, value)

    db.add(db_tag)
    commit(db)
    db.refresh(db_tag)
    return db_tag


def delete_tag(db: Session, id: int):
    tag = get_tag(db, id)
    db.execute(models.tutorial_tags.delete().where(models.tutorial_tags.c.tag_id == tag.id))
    db.delete(tag)
    commit(db)
