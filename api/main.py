from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import Depends, FastAPI, HTTPException

from core import db, errors, settings
from core.cors import PermissiveCORSMiddleware
from hello import router as hello_router
from users import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, handed to handlers through `db.get_pool`.
    app.state.pool = await db.create_pool()
    logger.info("db_pool_ready max_size=%s", settings.pool_max_size())
    try:
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None


def create_app() -> FastAPI:
    app = FastAPI(title="rgb-users-api", lifespan=lifespan)

    app.add_middleware(PermissiveCORSMiddleware)
    errors.install_error_handlers(app)

    app.include_router(hello_router.router, prefix="/hello", tags=["hello"])
    app.include_router(users_router.router, prefix="/api/v1", tags=["users"])

    @app.get("/health")
    async def health(pool=Depends(db.get_pool)) -> dict:
        if not await db.ping(pool):
            raise HTTPException(status_code=503, detail="Database is unavailable.")
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    settings.configure_logging()
    uvicorn.run(app, host=settings.host(), port=settings.port())


if __name__ == "__main__":
    run()
