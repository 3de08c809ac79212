from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from projecthub.api.routers import projects
from projecthub.core.config import get_settings
from projecthub.core.exceptions import AuthorizationDeniedError, NotFoundError
from projecthub.core.logger import ROOT_LOGGER_NAME, get_logger, setup_logger
from projecthub.db.session import init_db

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logger(
        ROOT_LOGGER_NAME,
        log_dir=settings.log_dir,
        level=settings.log_level,
        file_logging=settings.log_to_file,
    )
    init_db()
    logger.info("%s %s started", settings.app_name, settings.version)
    yield


app = FastAPI(
    title=settings.app_name,
    description="Project management backend with per-resource access control",
    version=settings.version,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AuthorizationDeniedError)
async def authorization_denied_handler(request: Request, exc: AuthorizationDeniedError):
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"error": "forbidden", "detail": str(exc)},
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": "not_found", "detail": str(exc)},
    )


app.include_router(projects.router, prefix="/api")


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.version}


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs" if settings.debug else None,
    }
