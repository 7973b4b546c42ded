"""FastAPI application serving the catalog pages over HTTP.

Routes:
- GET /catalog/authors         : author list
- GET /catalog/book/{book_id}  : one book with its copies
- GET /health                  : database connectivity check
"""

import logging
from collections.abc import AsyncGenerator, Generator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.orm import Session
from starlette.responses import Response as HTTPResponse

from .config import LibraryConfig, get_config
from .database.author_repository import AuthorRepository
from .database.book_instance_repository import BookInstanceRepository
from .database.book_repository import BookRepository
from .database.session import DatabaseManager
from .observability import configure_observability
from .pages import ResponseWriter, show_all_authors, show_book_details

logger = logging.getLogger(__name__)


def render(writer: ResponseWriter) -> HTTPResponse:
    """Turn what a page handler wrote into a Starlette response."""
    if isinstance(writer.body, (dict, list)):
        return JSONResponse(content=writer.body, status_code=writer.status_code)
    body = "" if writer.body is None else str(writer.body)
    return PlainTextResponse(content=body, status_code=writer.status_code)


# === Dependencies ===


def get_db_session(request: Request) -> Generator[Session, None, None]:
    """One session per request, committed or rolled back when it ends."""
    db_manager: DatabaseManager = request.app.state.db_manager
    with db_manager.session_scope() as session:
        yield session


def get_author_repository(session: Session = Depends(get_db_session)) -> AuthorRepository:
    return AuthorRepository(session)


def get_book_repository(session: Session = Depends(get_db_session)) -> BookRepository:
    return BookRepository(session)


def get_book_instance_repository(
    session: Session = Depends(get_db_session),
) -> BookInstanceRepository:
    return BookInstanceRepository(session)


# === Application ===


def create_app(
    config: LibraryConfig | None = None,
    db_manager: DatabaseManager | None = None,
) -> FastAPI:
    """
    Build the catalog application.

    Args:
        config: Settings; the global configuration when None
        db_manager: Database to serve from; built from ``config`` when None
    """
    config = config or get_config()
    db_manager = db_manager or DatabaseManager(config.get_database_url())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        app.state.db_manager.init_database()
        logger.info("%s v%s ready", config.server_name, config.server_version)
        yield
        app.state.db_manager.close()

    app = FastAPI(
        title="Local Library",
        description="Library catalog: authors and book details.",
        version=config.server_version,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.db_manager = db_manager

    configure_observability(config, app)

    @app.get("/health")
    def health_check(request: Request) -> JSONResponse:
        database_ok = request.app.state.db_manager.verify_connection()
        content: dict[str, Any] = {
            "status": "ok" if database_ok else "unavailable",
            "database": database_ok,
        }
        return JSONResponse(content=content, status_code=200 if database_ok else 503)

    @app.get("/catalog/authors")
    async def author_list(
        authors: AuthorRepository = Depends(get_author_repository),
    ) -> HTTPResponse:
        writer = ResponseWriter()
        await show_all_authors(writer, authors)
        return render(writer)

    @app.get("/catalog/book/{book_id}")
    async def book_detail(
        book_id: str,
        books: BookRepository = Depends(get_book_repository),
        copies: BookInstanceRepository = Depends(get_book_instance_repository),
    ) -> HTTPResponse:
        writer = ResponseWriter()
        await show_book_details(writer, book_id, books, copies)
        return render(writer)

    return app
