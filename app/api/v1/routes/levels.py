from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse

from core.config import PAGE_SIZE
from db.session import get_db
from db.crud.tutorials import count_by_difficulty, filter_tutorials, total_pages
from db.models.tutorials import DIFFICULTIES
from db.schemas.common import DataResponse, Page
from db.schemas.tutorials import LevelCounts, Tutorial
from utils.logger import logger, myself

levels_router = r = APIRouter()


@r.get(
    "",
    response_model=DataResponse[LevelCounts],
    name="levels:counts"
)
def levels_counts(
    db=Depends(get_db),
):
    """
    Number of published problems per difficulty
    """
    try:
        return {"data": count_by_difficulty(db)}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.get(
    "/{level}",
    response_model=Page[Tutorial],
    name="levels:level-problems"
)
def level_problems(
    level: str,
    page: int = 1,
    db=Depends(get_db),
):
    """
    Get one page of published problems of a single difficulty
    """
    if level not in DIFFICULTIES:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="level not found")
    try:
        page = max(page, 1)
        tutorials, total = filter_tutorials(db, difficulties=[level], page=page, page_size=PAGE_SIZE)
        return {
            "data": tutorials,
            "total": total,
            "page": page,
            "pageSize": PAGE_SIZE,
            "totalPages": total_pages(total, PAGE_SIZE),
        }
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})
