from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core import config
from app.routers import assistant, generate, pantry, proxy, recipes, session, translate
from app.routers import health
from app.core.logging import setup_logging
from app.core.middleware import RequestLoggingMiddleware
from app.services.common import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(config.KITCHEN_DB)
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="Chef AI", version=config.APP_VERSION, lifespan=lifespan)
    app.include_router(proxy.router)
    app.include_router(generate.router)
    app.include_router(translate.router)
    app.include_router(pantry.router)
    app.include_router(recipes.router)
    app.include_router(assistant.router)
    app.include_router(session.router)
    app.include_router(health.router)

    setup_logging()

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ORIGINS != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app

app = create_app()
