from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse

from core.config import PAGE_SIZE
from core.security import require_api_key
from db.session import get_db
from db.crud.tutorials import (
    filter_tutorials,
    get_published_tutorial,
    increment_views,
    create_tutorial,
    edit_tutorial,
    delete_tutorial,
    total_pages,
)
from db.schemas.common import DataResponse, Message, Page
from db.schemas.tutorials import CreateTutorial, UpdateTutorial, Tutorial
from utils.logger import logger, myself
from utils.slug import split_csv

problems_router = r = APIRouter()


@r.get(
    "",
    response_model=Page[Tutorial],
    name="problems:all-problems"
)
def problems_list(
    q: str = None,
    difficulty: str = None,
    category: str = None,
    topic: str = None,
    page: int = 1,
    db=Depends(get_db),
):
    """
    Get one page of published problems

    difficulty, category and topic take comma separated values
    """
    try:
        page = max(page, 1)
        tutorials, total = filter_tutorials(
            db,
            search=(q or '').strip(),
            difficulties=split_csv(difficulty),
            categories=split_csv(category),
            topics=split_csv(topic),
            page=page,
            page_size=PAGE_SIZE,
        )
        return {
            "data": [Tutorial.model_validate(tutorial) for tutorial in tutorials],
            "total": total,
            "page": page,
            "pageSize": PAGE_SIZE,
            "totalPages": total_pages(total, PAGE_SIZE),
        }
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.get(
    "/{slug}",
    response_model=DataResponse[Tutorial],
    name="problems:problem-details"
)
def problem_details(
    slug: str,
    db=Depends(get_db),
):
    """
    Get a published problem and count the view
    """
    try:
        tutorial = Tutorial.model_validate(get_published_tutorial(db, slug))
        increment_views(db, tutorial.id)
        return {"data": tutorial}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.post(
    "",
    response_model=DataResponse[Tutorial],
    status_code=status.HTTP_201_CREATED,
    name="problems:create"
)
def problem_create(
    tutorial: CreateTutorial,
    db=Depends(get_db),
    api_key=Depends(require_api_key),
):
    """
    Create a new problem
    """
    try:
        return {"data": Tutorial.model_validate(create_tutorial(db, tutorial))}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.put(
    "/{slug}",
    response_model=DataResponse[Tutorial],
    name="problems:edit"
)
def problem_edit(
    slug: str,
    tutorial: UpdateTutorial,
    db=Depends(get_db),
    api_key=Depends(require_api_key),
):
    """
    Update existing problem
    """
    try:
        return {"data": Tutorial.model_validate(edit_tutorial(db, slug, tutorial))}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.delete(
    "/{slug}",
    response_model=Message,
    name="problems:delete"
)
def problem_delete(
    slug: str,
    db=Depends(get_db),
    api_key=Depends(require_api_key),
):
    """
    Delete existing problem
    """
    try:
        delete_tutorial(db, slug)
        return {"message": "Deleted successfully"}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})
