from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse
import typing as t

from db.session import get_db
from db.crud.tutorials import search_tutorials
from db.schemas.common import DataResponse
from db.schemas.tutorials import Tutorial
from utils.logger import logger, myself

search_router = r = APIRouter()


@r.get(
    "",
    response_model=DataResponse[t.List[Tutorial]],
    name="search:problems"
)
def search(
    q: str = '',
    db=Depends(get_db),
):
    """
    Search published problems by title, description and statement, most viewed first
    """
    try:
        return {"data": search_tutorials(db, q)}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})
