import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from sales_purchase import __version__, models  # noqa: F401  models registers the tables
from sales_purchase.config import Settings, get_settings
from sales_purchase.core.logging import setup_logging
from sales_purchase.database import Base, engine
from sales_purchase.routers import health_router, purchases_router, sales_router

logger = logging.getLogger(__name__)

setup_logging()
settings: Settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info(
        "%s %s started (environment=%s, ledger=%s)",
        settings.APP_NAME,
        __version__,
        settings.ENVIRONMENT,
        settings.STOCK_LEDGER_BACKEND,
    )
    try:
        yield
    finally:
        logger.info("%s shutting down", settings.APP_NAME)


app = FastAPI(title=settings.APP_NAME, version=__version__, lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - started) * 1000,
    )
    return response


app.include_router(health_router)
app.include_router(sales_router)
app.include_router(purchases_router)


@app.get("/")
def root():
    return {"app": settings.APP_NAME, "version": __version__, "docs": "/docs"}


def run():
    import uvicorn

    uvicorn.run("sales_purchase.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()


__all__ = ["app", "root", "run"]
