from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse
import typing as t

from core.security import require_api_key
from db.session import get_db
from db.crud.categories import (
    get_categories,
    get_category_by_slug,
    create_category,
    edit_category,
    delete_category,
)
from db.crud.tutorials import get_category_tutorials
from db.schemas.categories import CreateCategory, UpdateCategory, Category
from db.schemas.common import DataResponse, Message
from db.schemas.tutorials import CategoryDetails
from utils.logger import logger, myself

categories_router = r = APIRouter()


@r.get(
    "",
    response_model=DataResponse[t.List[Category]],
    name="categories:all-categories"
)
def categories_list(
    db=Depends(get_db),
):
    """
    Get all categories in display order
    """
    try:
        return {"data": get_categories(db)}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.get(
    "/{slug}",
    response_model=DataResponse[CategoryDetails],
    name="categories:category-details"
)
def category_details(
    slug: str,
    db=Depends(get_db),
):
    """
    Get a category with its published problems
    """
    try:
        category = get_category_by_slug(db, slug)
        return {"data": {"category": category, "tutorials": get_category_tutorials(db, category.id)}}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.post(
    "",
    response_model=DataResponse[Category],
    status_code=status.HTTP_201_CREATED,
    name="categories:create"
)
def category_create(
    category: CreateCategory,
    db=Depends(get_db),
    api_key=Depends(require_api_key),
):
    """
    Create a new category
    """
    try:
        return {"data": create_category(db, category)}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.put(
    "/{category_id}",
    response_model=DataResponse[Category],
    name="categories:edit"
)
def category_edit(
    category_id: int,
    category: UpdateCategory,
    db=Depends(get_db),
    api_key=Depends(require_api_key),
):
    """
    Update existing category
    """
    try:
        return {"data": edit_category(db, category_id, category)}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.delete(
    "/{category_id}",
    response_model=Message,
    name="categories:delete"
)
def category_delete(
    category_id: int,
    db=Depends(get_db),
    api_key=Depends(require_api_key),
):
    """
    Delete existing category, its problems become uncategorised
    """
    try:
        delete_category(db, category_id)
        return {"message": "Deleted successfully"}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})
