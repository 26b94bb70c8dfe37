import logging
import time
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from routers import books
from routers.books import get_repository
from config import settings
from errors import NotFoundError, ValidationError
from logging_config import setup_logging
from repository import BookRepository, random_id_factory

# Setup logging
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup logic
    logger.info("Starting up bookshelf-api on %s:%s...", settings.HOST, settings.PORT)
    yield
    # Shutdown logic
    logger.info("Shutting down bookshelf-api...")

app = FastAPI(
    title="Bookshelf API",
    description="In-memory book inventory service",
    version="1.0.0",
    lifespan=lifespan
)

# Records live only as long as the process
app.state.repository = BookRepository(id_factory=random_id_factory(settings.BOOK_ID_LENGTH))

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.info(
        "%s %s -> %s (%.2f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


def _fail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "fail", "message": message})


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return _fail(status.HTTP_400_BAD_REQUEST, exc.message)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return _fail(status.HTTP_404_NOT_FOUND, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    action = "update" if request.method == "PUT" else "add"
    # a missing name is reported ahead of any other payload problem
    name = exc.body.get("name") if isinstance(exc.body, dict) else None
    if not isinstance(name, str) or not name.strip():
        return _fail(
            status.HTTP_400_BAD_REQUEST,
            f"Failed to {action} book. Please provide a book name.",
        )
    fields = ", ".join(
        ".".join(str(part) for part in error["loc"][1:]) or "body" for error in exc.errors()
    )
    logger.warning("Malformed %s %s payload: %s", request.method, request.url.path, fields)
    return _fail(
        status.HTTP_400_BAD_REQUEST,
        f"Failed to {action} book. Invalid value for: {fields}.",
    )


# Health check endpoint
@app.get("/health", tags=["System"])
async def health_check(repository: BookRepository = Depends(get_repository)):
    return {
        "status": "healthy",
        "service": "bookshelf-api",
        "books": len(repository),
    }

app.include_router(books.router, tags=["Books"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
