from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse

from signal_engine.api.cors import CORS_HEADERS
from signal_engine.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
def health() -> str:
    return f"{settings.APP_TITLE} running"


# Preflights are answered by AllowAllCORSMiddleware; bare OPTIONS land here.
@router.options("/{path:path}", include_in_schema=False)
def options(path: str) -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)
