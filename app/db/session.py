from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config import Config, Environment  # api specific config
CFG = Config[Environment]

connect_args = {}
if CFG.connectionString.startswith('sqlite'):
    # sessions are handed to threadpool workers by fastapi
    connect_args = {'check_same_thread': False}

engine = create_engine(CFG.connectionString, echo=CFG.sqlEcho, pool_pre_ping=True, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


# automatically build the models
def init_db(bind=engine):
    # register every table on Base.metadata
    from db.models import api_keys, categories, tags, tutorials  # noqa: F401
    Base.metadata.create_all(bind=bind)


# Dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def commit(db):
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
