import uvicorn
import time

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from config import Config, Environment
from core.config import PROJECT_NAME, API_V1_STR
from core.security import require_api_key, rejects_api_key, UNAUTHORIZED
from db.schemas.common import Error
from db.session import init_db
from utils.logger import logger, myself, LEIF

from api.v1.routes.home import home_router
from api.v1.routes.problems import problems_router
from api.v1.routes.categories import categories_router
from api.v1.routes.tags import tags_router
from api.v1.routes.levels import levels_router
from api.v1.routes.search import search_router
from api.v1.routes.admin import admin_router

CFG = Config[Environment]
DEBUG = CFG.debug

app = FastAPI(
    title=PROJECT_NAME,
    docs_url=f"{API_V1_STR}/docs",
    openapi_url=API_V1_STR
)

# error bodies share one shape
ERRORS = {code: {"model": Error} for code in (400, 401, 404, 500)}

#region Routers
app.include_router(home_router,         prefix=f"{API_V1_STR}/home",       tags=["home"], responses=ERRORS)
app.include_router(problems_router,     prefix=f"{API_V1_STR}/problems",   tags=["problems"], responses=ERRORS)
app.include_router(categories_router,   prefix=f"{API_V1_STR}/categories", tags=["categories"], responses=ERRORS)
app.include_router(tags_router,         prefix=f"{API_V1_STR}/tags",       tags=["tags"], responses=ERRORS)
app.include_router(levels_router,       prefix=f"{API_V1_STR}/levels",     tags=["levels"], responses=ERRORS)
app.include_router(search_router,       prefix=f"{API_V1_STR}/search",     tags=["search"], responses=ERRORS)
app.include_router(admin_router,        prefix=f"{API_V1_STR}/admin",      tags=["admin"], dependencies=[Depends(require_api_key)], responses=ERRORS)
#endregion Routers

app.add_middleware(
    CORSMiddleware,
    allow_origins=CFG.corsOrigins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# every error leaves as {"error": ...}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(req: Request, exc: StarletteHTTPException):
    content = exc.detail if isinstance(exc.detail, dict) else {'error': str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, 'headers', None))


@app.exception_handler(RequestValidationError)
def validation_exception_handler(req: Request, exc: RequestValidationError):
    if rejects_api_key(req):
        return JSONResponse(status_code=401, content=UNAUTHORIZED)

    missing = [str(err['loc'][-1]) for err in exc.errors() if err.get('type') in ('missing', 'string_too_short')]
    if missing:
        error = f"Missing required fields ({', '.join(missing)})"
    else:
        error = '; '.join(f"{'.'.join(str(l) for l in err['loc'])}: {err['msg']}" for err in exc.errors())
    logger.debug(f'{myself()}: {req.url}: {error}')
    return JSONResponse(status_code=400, content={'error': error})


# all requests are timed and logged
@app.middleware("http")
async def add_logging_and_process_time(req: Request, call_next):
    try:
        beg = time.time()
        resNext = await call_next(req)
        tot = str(round((time.time() - beg) * 1000))
        resNext.headers["X-Process-Time-MS"] = tot
        logger.log(LEIF, f"""{req.method} {req.url}: {resNext.status_code} {tot}ms""".strip())
        return resNext

    except Exception as e:
        logger.error(f'ERR:middleware:{myself()}: {e}')
        return JSONResponse(status_code=500, content={'error': 'internal server error'})


@app.on_event('startup')
def startup():
    logger.info(f'{PROJECT_NAME}: creating tables ({Environment})')
    init_db()


@app.get(f"{API_V1_STR}/ping")
async def ping():
    return {"hello": "world"}

# MAIN
if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", reload=DEBUG, port=8000)
