# app/api/hello.py

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.clients.external import ExternalServiceClient

router = APIRouter(tags=["hello"])

GREETING = "Hello World"


def get_external_client(request: Request) -> ExternalServiceClient:
    # Created by the app lifespan in app/main.py.
    client = getattr(request.app.state, "external_client", None)
    if client is None:
        raise RuntimeError("External client not initialised; run the app with its lifespan enabled")
    return client


@router.get("/hello", response_class=PlainTextResponse)
def say_hello(
    client: ExternalServiceClient = Depends(get_external_client),
) -> str:
    """
    Call the external service, then greet. The downstream result is ignored.
    """
    client.fetch()
    return GREETING
