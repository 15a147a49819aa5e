import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ensgraph.config import settings
from ensgraph.logging_config import configure_logging
from ensgraph.routers import ens, health, relationships
from ensgraph.domain.errors import ConflictError, ProviderError, ValidationError
from ensgraph.application.event_handlers import register_event_handlers
from ensgraph.db.init_db import init_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    register_event_handlers()
    init_database()
    yield


app = FastAPI(
    title="ENS Graph API",
    description="Resolve ENS names to profiles and store a social graph between them",
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allows all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)


# Domain error handlers
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(ConflictError)
async def conflict_error_handler(request: Request, exc: ConflictError):
    return JSONResponse(status_code=409, content={"error": str(exc)})


@app.exception_handler(ProviderError)
async def provider_error_handler(request: Request, exc: ProviderError):
    return JSONResponse(status_code=502, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_body_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": str(exc.orig) if getattr(exc, "orig", None) else str(exc)})

# Include routers
app.include_router(health.router, tags=["Health"])  # Health check endpoints first
app.include_router(relationships.router, tags=["Relationships"])
app.include_router(ens.router, tags=["ENS"])

@app.get("/")
async def root():
    return {"message": "Welcome to the ENS Graph API. See /docs for API documentation"}
