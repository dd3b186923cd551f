import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scripthub import __version__
from scripthub.api import create_api_router
from scripthub.core.config import Settings, get_settings
from scripthub.infrastructure.database import dispose_engine, get_session, init_db
from scripthub.modules.access import RoleService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.logging.level.upper(), format=settings.logging.format)


async def seed_bootstrap_admins(identities: list[str]) -> None:
    if not identities:
        return
    async for db in get_session():
        promoted = await RoleService.with_session(db).seed_admins(identities)
        if promoted:
            logger.info("Seeded %d bootstrap admin(s)", len(promoted))


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    await seed_bootstrap_admins(get_settings().bootstrap_admins)
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Script sharing service with role-gated trash and restore",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok", "version": __version__}

    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "scripthub.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
