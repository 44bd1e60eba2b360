# app/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.hello import router as hello_router
from app.clients.external import ExternalServiceClient
from app.config import get_settings
from app.logging_config import setup_logging
from app.models.health import HealthOut

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app.state.external_client = ExternalServiceClient(
        settings.EXTERNAL_SERVICE_URL,
        timeout=settings.EXTERNAL_TIMEOUT_SECONDS,
    )
    logger.info("Started %s, external service at %s", settings.SERVICE_NAME, settings.EXTERNAL_SERVICE_URL)
    try:
        yield
    finally:
        app.state.external_client.close()


app = FastAPI(
    title="Hello Proxy API",
    version="0.1.0",
    lifespan=lifespan,
)

@app.get("/health", response_model=HealthOut)
def health_check() -> HealthOut:
    return HealthOut(status="ok", service=get_settings().SERVICE_NAME)

app.include_router(hello_router)
