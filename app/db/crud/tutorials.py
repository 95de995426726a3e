import datetime
import math
from fastapi import HTTPException, status
from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import typing as t

from core.config import PAGE_SIZE, ADMIN_PAGE_SIZE, SEARCH_LIMIT
from db.crud.categories import get_category_ids
from db.crud.tags import get_tag_ids
from db.models import tutorials as models
from db.models.categories import Category
from db.models.tags import Tag, tutorial_tags
from db.schemas import tutorials as schemas
from db.session import commit
from utils.logger import logger, myself


#############################################
### CRUD OPERATIONS FOR TUTORIALS SECTION ###
#############################################

def published(db: Session):
    return db.query(models.Tutorial).filter(models.Tutorial.status == 'published')


def newest_first(query):
    # id breaks ties so consecutive pages never overlap
    return query.order_by(
        models.Tutorial.published_at.desc().nulls_last(), models.Tutorial.id.desc())


def total_pages(total: int, page_size: int) -> int:
    return math.ceil(total / page_size) if page_size else 0


def paginate(query, page: int, page_size: int):
    page = max(page, 1)
    return query.offset((page - 1) * page_size).limit(page_size).all()


def filter_tutorials(
    db: Session,
    search: t.Optional[str] = None,
    difficulties: t.Optional[t.List[str]] = None,
    categories: t.Optional[t.List[str]] = None,
    topics: t.Optional[t.List[str]] = None,
    page: int = 1,
    page_size: int = PAGE_SIZE,
) -> t.Tuple[t.List[models.Tutorial], int]:
    """
    Compose the problem listing query.

    Every supplied dimension narrows the published set (logical AND); within
    a dimension any listed value matches (logical OR). An empty or missing
    list leaves its dimension unconstrained, while slugs that resolve to
    nothing empty the result. Returns the requested page, newest first, and
    the total number of matches.
    """
    query = published(db)

    if topics:
        tag_ids = get_tag_ids(db, topics)
        if not tag_ids:
            return [], 0
        tutorial_ids = sorted({id for (id,) in db.query(tutorial_tags.c.tutorial_id).filter(
            tutorial_tags.c.tag_id.in_(tag_ids))})
        if not tutorial_ids:
            return [], 0
        query = query.filter(models.Tutorial.id.in_(tutorial_ids))

    if categories:
        category_ids = get_category_ids(db, categories)
        if not category_ids:
            return [], 0
        query = query.filter(models.Tutorial.category_id.in_(category_ids))

    if search:
        query = query.filter(or_(
            models.Tutorial.title.icontains(search, autoescape=True),
            models.Tutorial.description.icontains(search, autoescape=True),
        ))

    if difficulties:
        query = query.filter(models.Tutorial.difficulty.in_(difficulties))

    total = query.count()
    return paginate(newest_first(query), page, page_size), total


def get_tutorial_by_slug(db: Session, slug: str):
    tutorial = db.query(models.Tutorial).filter(models.Tutorial.slug == slug).first()
    if not tutorial:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="tutorial not found")
    return tutorial


def get_published_tutorial(db: Session, slug: str):
    tutorial = published(db).filter(models.Tutorial.slug == slug).first()
    if not tutorial:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="tutorial not found")
    return tutorial


def increment_views(db: Session, id: int):
    """Best effort; a failed increment never fails the read."""
    try:
        db.query(models.Tutorial).filter(models.Tutorial.id == id).update({
            models.Tutorial.views: models.Tutorial.views + 1,
            models.Tutorial.updated_at: models.Tutorial.updated_at,
        }, synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning(f'ERR:{myself()}: view count not updated for tutorial {id}: {e}')


def search_tutorials(db: Session, q: str, limit: int = SEARCH_LIMIT) -> t.List[models.Tutorial]:
    q = (q or '').strip()
    if not q:
        return []
    return published(db).filter(or_(
        models.Tutorial.title.icontains(q, autoescape=True),
        models.Tutorial.description.icontains(q, autoescape=True),
        models.Tutorial.problem_statement.icontains(q, autoescape=True),
    )).order_by(models.Tutorial.views.desc(), models.Tutorial.id.desc()).limit(limit).all()


def count_by_difficulty(db: Session) -> t.Dict[str, int]:
    counts = {difficulty: 0 for difficulty in models.DIFFICULTIES}
    rows = db.query(models.Tutorial.difficulty, func.count(models.Tutorial.id)).filter(
        models.Tutorial.status == 'published').group_by(models.Tutorial.difficulty).all()
    for difficulty, count in rows:
        counts[difficulty] = count
    return counts


def get_category_tutorials(db: Session, category_id: int) -> t.List[models.Tutorial]:
    return newest_first(published(db).filter(models.Tutorial.category_id == category_id)).all()


def get_tag_tutorials(db: Session, tag_id: int) -> t.List[models.Tutorial]:
    return newest_first(published(db).filter(
        models.Tutorial.tags.any(Tag.id == tag_id))).all()


def get_popular_tutorials(db: Session, limit: int = 3) -> t.List[models.Tutorial]:
    return published(db).order_by(
        models.Tutorial.views.desc(), models.Tutorial.id.desc()).limit(limit).all()


def get_recent_tutorials(db: Session, limit: int = 6) -> t.List[models.Tutorial]:
    return newest_first(published(db)).limit(limit).all()


def get_all_tutorials(
    db: Session, search: t.Optional[str] = None, page: int = 1, page_size: int = ADMIN_PAGE_SIZE
) -> t.Tuple[t.List[models.Tutorial], int]:
    # back-office listing, drafts included
    query = db.query(models.Tutorial)
    if search:
        query = query.filter(models.Tutorial.title.icontains(search, autoescape=True))
    total = query.count()
    return paginate(query.order_by(
        models.Tutorial.created_at.desc(), models.Tutorial.id.desc()), page, page_size), total


def resolve_tags(db: Session, slugs: t.List[str]) -> t.List[Tag]:
    tags = db.query(Tag).filter(Tag.slug.in_(slugs)).all() if slugs else []
    missing = set(slugs) - {tag.slug for tag in tags}
    if missing:
        logger.warning(f'{myself()}: ignoring unknown tags {sorted(missing)}')
    return tags


def sync_tags(db: Session, db_tutorial: models.Tutorial, slugs: t.List[str]):
    # diff the link set; the flush of the enclosing write applies it
    wanted = {tag.id: tag for tag in resolve_tags(db, slugs)}
    for tag in list(db_tutorial.tags):
        if tag.id not in wanted:
            db_tutorial.tags.remove(tag)
    current = {tag.id for tag in db_tutorial.tags}
    for id, tag in wanted.items():
        if id not in current:
            db_tutorial.tags.append(tag)


def refresh_counts(db: Session, category_ids: t.Iterable[int], tag_ids: t.Iterable[int]):
    db.flush()
    for category_id in {id for id in category_ids if id is not None}:
        count = published(db).filter(models.Tutorial.category_id == category_id).count()
        db.query(Category).filter(Category.id == category_id).update(
            {Category.tutorial_count: count}, synchronize_session=False)
    for tag_id in set(tag_ids):
        count = db.query(func.count(tutorial_tags.c.tutorial_id)).select_from(tutorial_tags).join(
            models.Tutorial, models.Tutorial.id == tutorial_tags.c.tutorial_id).filter(
            tutorial_tags.c.tag_id == tag_id, models.Tutorial.status == 'published').scalar()
        db.query(Tag).filter(Tag.id == tag_id).update(
            {Tag.tutorial_count: count}, synchronize_session=False)


def stamp_published(db_tutorial: models.Tutorial):
    if db_tutorial.status == 'published' and db_tutorial.published_at is None:
        db_tutorial.published_at = datetime.datetime.now(datetime.timezone.utc)


def create_tutorial(db: Session, tutorial: schemas.CreateTutorial):
    db_tutorial = models.Tutorial(**tutorial.model_dump(exclude={'tags'}))
    db_tutorial.views = 0
    stamp_published(db_tutorial)
    db.add(db_tutorial)
    if tutorial.tags:
        sync_tags(db, db_tutorial, tutorial.tags)

    refresh_counts(db, [db_tutorial.category_id], [tag.id for tag in db_tutorial.tags])
    commit(db)
    db.refresh(db_tutorial)
    return db_tutorial


def edit_tutorial(db: Session, slug: str, tutorial: schemas.UpdateTutorial):
    db_tutorial = get_tutorial_by_slug(db, slug)
    old_category_id = db_tutorial.category_id
    old_tag_ids = [tag.id for tag in db_tutorial.tags]

    update_data = tutorial.model_dump(exclude_unset=True, exclude={'tags'})
    for key, value in update_data.items():
        setattr(db_tutorial, key, value)
    stamp_published(db_tutorial)
    if tutorial.tags is not None:
        sync_tags(db, db_tutorial, tutorial.tags)

    db.add(db_tutorial)
    refresh_counts(
        db,
        [old_category_id, db_tutorial.category_id],
        old_tag_ids + [tag.id for tag in db_tutorial.tags],
    )
    commit(db)
    db.refresh(db_tutorial)
    return db_tutorial


def delete_tutorial(db: Session, slug: str):
    db_tutorial = get_tutorial_by_slug(db, slug)
    category_id = db_tutorial.category_id
    tag_ids = [tag.id for tag in db_tutorial.tags]

    db.delete(db_tutorial)
    refresh_counts(db, [category_id], tag_ids)
    commit(db)


def count_tutorials(db: Session, published_only: bool = False) -> int:
    query = published(db) if published_only else db.query(models.Tutorial)
    return query.count()


def total_views(db: Session) -> int:
    return db.query(func.coalesce(func.sum(models.Tutorial.views), 0)).scalar()
