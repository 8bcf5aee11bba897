import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from signal_engine.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
    ]
)

from signal_engine.api.routes import analytics, feedback, health
from signal_engine.api.cors import CORS_HEADERS, AllowAllCORSMiddleware
from signal_engine.db.session import init_db
from signal_engine.services.feedback import FeedbackValidationError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s ready", settings.APP_TITLE)
    yield


app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)

app.add_middleware(
    AllowAllCORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


app.include_router(health.router)
app.include_router(feedback.router)
app.include_router(analytics.router)


@app.exception_handler(FeedbackValidationError)
async def feedback_validation_handler(request: Request, exc: FeedbackValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request body") if errors else "Invalid request body"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    # Unsupported methods on known paths are reported as unknown routes too.
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not found", status_code=404, headers=CORS_HEADERS)
    return await http_exception_handler(request, exc)
