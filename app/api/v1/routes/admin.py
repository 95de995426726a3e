from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse

from core.config import ADMIN_PAGE_SIZE
from db.session import get_db
from db.crud.stats import get_admin_stats
from db.crud.tutorials import get_all_tutorials, total_pages
from db.schemas.common import DataResponse, Page
from db.schemas.tutorials import AdminStats, TutorialListItem
from utils.logger import logger, myself

admin_router = r = APIRouter()


@r.get(
    "/stats",
    response_model=DataResponse[AdminStats],
    name="admin:dashboard"
)
def dashboard(
    db=Depends(get_db),
):
    """
    Dashboard totals and the latest problems
    """
    try:
        return {"data": get_admin_stats(db)}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})


@r.get(
    "/problems",
    response_model=Page[TutorialListItem],
    name="admin:all-problems"
)
def admin_problems(
    q: str = None,
    page: int = 1,
    db=Depends(get_db),
):
    """
    Get every problem, drafts included, newest first
    """
    try:
        page = max(page, 1)
        tutorials, total = get_all_tutorials(db, (q or '').strip(), page, ADMIN_PAGE_SIZE)
        return {
            "data": tutorials,
            "total": total,
            "page": page,
            "pageSize": ADMIN_PAGE_SIZE,
            "totalPages": total_pages(total, ADMIN_PAGE_SIZE),
        }
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})
