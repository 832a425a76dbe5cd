import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from coursemart.core.config import get_settings, load_cors_origins
from coursemart.core.errors import CourseMarketError
from coursemart.database import init_database
from coursemart.routes import admin_routes, user_routes

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(load_cors_origins()),
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.exception_handler(CourseMarketError)
async def course_market_error_handler(request: Request, exc: CourseMarketError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={'message': exc.message})


@app.on_event('startup')
def initialize_database() -> None:
    settings = get_settings()
    try:
        init_database(settings.database_url)
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL.')
        raise


@app.get('/')
def root():
    return {'status': 'Course Marketplace API Running'}


app.include_router(admin_routes.router, prefix='/admin')
app.include_router(user_routes.router, prefix='/users')


def run() -> None:
    settings = get_settings()
    logging.basicConfig(level=logging.DEBUG if settings.app_env == 'development' else logging.INFO)
    uvicorn.run(app, host='0.0.0.0', port=settings.port)
