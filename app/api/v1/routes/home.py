from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse

from db.session import get_db
from db.crud.stats import get_home
from db.schemas.common import DataResponse
from db.schemas.tutorials import Home
from utils.logger import logger, myself

home_router = r = APIRouter()


@r.get(
    "",
    response_model=DataResponse[Home],
    name="home:digest"
)
def home(
    db=Depends(get_db),
):
    """
    Popular and recent problems, leading categories and site totals
    """
    try:
        return {"data": get_home(db)}
    except SQLAlchemyError as e:
        logger.error(f'ERR:{myself()}: {e}')
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={'error': str(e)})
