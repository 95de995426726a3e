import datetime
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import typing as t

from db.models import api_keys as models
from utils.logger import logger, myself


####################################
### CRUD OPERATIONS FOR API KEYS ###
####################################

def get_active_api_key(db: Session, key: str) -> t.Optional[models.ApiKey]:
    if not key:
        return None
    return db.query(models.ApiKey).filter(
        models.ApiKey.key == key, models.ApiKey.is_active == True).first()


def touch_api_key(db: Session, id: int):
    # last_used_at is informational, never block the caller on it
    try:
        db.query(models.ApiKey).filter(models.ApiKey.id == id).update(
            {models.ApiKey.last_used_at: datetime.datetime.now(datetime.timezone.utc)},
            synchronize_session=False)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning(f'ERR:{myself()}: last_used_at not updated for key {id}: {e}')
