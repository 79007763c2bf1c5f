import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from worktracker.config import settings
from worktracker.database.base import Base
from worktracker.database.session import engine
from worktracker.models.task import Task  # noqa: F401
from worktracker.models.user_settings import UserSettings  # noqa: F401
from worktracker.models.work_log import WorkLog  # noqa: F401
from worktracker.routes import logs, settings as settings_routes, summary, timer

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Work Tracker")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def create_tables():
    Base.metadata.create_all(bind=engine)


def _format_validation_messages(exc: RequestValidationError) -> list[str]:
    messages: list[str] = []
    for err in exc.errors():
        loc = [str(v) for v in err.get("loc", []) if str(v) not in {"body", "query", "path", "form"}]
        field = ".".join(loc) if loc else "field"
        err_type = str(err.get("type", ""))
        message = str(err.get("msg", "Invalid value"))

        if err_type in {"missing", "value_error.missing"}:
            messages.append(f"{field} is required")
        elif field:
            messages.append(f"{field}: {message}")
        else:
            messages.append(message)

    # Preserve order while de-duplicating.
    return list(dict.fromkeys(messages))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code >= 400 and exc.status_code != 401:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = _format_validation_messages(exc)
    detail = messages[0] if len(messages) == 1 else "Validation failed"
    return JSONResponse(
        status_code=400,
        content={
            "error": detail,
            "errors": messages,
        },
    )


@app.exception_handler(SQLAlchemyError)
async def store_exception_handler(request: Request, exc: SQLAlchemyError):
    message = str(getattr(exc, "orig", None) or exc)
    logger.warning(f"{request.method} {request.url.path} store failure: {message}")
    return JSONResponse(
        status_code=400,
        content={"error": message},
    )


app.include_router(timer.router)
app.include_router(logs.router)
app.include_router(settings_routes.router)
app.include_router(summary.router)
