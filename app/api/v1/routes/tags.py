from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse
import typing as t

from core.security import require_api_key
from db.session import get_db
from db.crud.tags import (
    get_tags,
    get_tag_by_slug,
    create_tag,
    edit_tag,
    delete_tag,
)
from db.crud.tutorials import get_tag_tutorials
from db.schemas.common import DataResponse, Message
from db.schemas.tags import CreateTag, UpdateTag, Tag
from db.schemas.tutorials import TagDetails
from utils.logger import logger, myself

tags_router = r = APIRouter()


@r.get(
    "",
    response_model=DataResponse[t.List[Tag]],
    name="tags:all-tags"
)
def tags_list(
    sort: t.Literal['popular', 'name'] = 'popular',
    db=Depends(get_db),
):
    """
    Get all topics, most used first unless sort=name
    """
    try:
        return {"data": get_tags(db, sort)}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.get(
    "/{slug}",
    response_model=DataResponse[TagDetails],
    name="tags:tag-details"
)
def tag_details(
    slug: str,
    db=Depends(get_db),
):
    """
    Get a topic with its published problems
    """
    try:
        tag = get_tag_by_slug(db, slug)
        return {"data": {"tag": tag, "tutorials": get_tag_tutorials(db, tag.id)}}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.post(
    "",
    response_model=DataResponse[Tag],
    status_code=status.HTTP_201_CREATED,
    name="tags:create"
)
def tag_create(
    tag: CreateTag,
    db=Depends(get_db),
    api_key=Depends(require_api_key),
):
    """
    Create a new topic
    """
    try:
        return {"data": create_tag(db, tag)}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.put(
    "/{tag_id}",
    response_model=DataResponse[Tag],
    name="tags:edit"
)
def tag_edit(
    tag_id: int,
    tag: UpdateTag,
    db=Depends(get_db),
    api_key=Depends(require_api_key),
):
    """
    Update existing topic
    """
    try:
        return {"data": edit_tag(db, tag_id, tag)}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.delete(
    "/{tag_id}",
    response_model=Message,
    name="tags:delete"
)
def tag_delete(
    tag_id: int,
    db=Depends(get_db),
    api_key=Depends(require_api_key),
):
    """
    Delete existing topic
    """
    try:
        delete_tag(db, tag_id)
        return {"message": "Deleted successfully"}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})
