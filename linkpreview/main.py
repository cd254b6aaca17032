"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from linkpreview.api.routes import router
from linkpreview.config import get_settings
from linkpreview.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting link preview service")

    app.state.settings = settings

    logger.info(
        "link preview service ready",
        extra={
            "headless": settings.headless,
            "navigation_timeout_ms": settings.navigation_timeout_ms,
            "max_batch_size": settings.max_batch_size,
        },
    )

    yield

    logger.info("shutting down link preview service")


app = FastAPI(title="Link Preview Service", lifespan=lifespan)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_config=None)
