import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional, Sequence

import uvicorn
from fastapi import APIRouter, FastAPI, Request

from todo_api.config import get_settings
from todo_api.database import engine, init_models
from todo_api.errors import install_error_handlers
from todo_api.logging_utils import configure_logging, reset_request_id, set_request_id
from todo_api.routers import todo_router, user_router

logger = logging.getLogger(__name__)

DEFAULT_ROUTERS = (
    (user_router.router, "/users", "Users"),
    (todo_router.router, "/todos", "Todos"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    logger.info("Database schema ready")
    yield
    await engine.dispose()


def create_app(
    title: Optional[str] = None,
    routers: Sequence[tuple[APIRouter, str, str]] = DEFAULT_ROUTERS,
) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=title or settings.title,
        description="A simple CRUD API for managing users and their todo items",
        version="1.0.0",
        docs_url="/api",
        lifespan=lifespan,
    )
    install_error_handlers(app)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(token)
        response.headers["X-Request-ID"] = request_id
        return response

    for router, prefix, tag in routers:
        app.include_router(router, prefix=prefix, tags=[tag])

    # Root health
    @app.get("/")
    async def read_root():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    logger.info("Application is running on: http://%s:%s", settings.host, settings.port)
    logger.info("Swagger documentation: http://%s:%s/api", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
