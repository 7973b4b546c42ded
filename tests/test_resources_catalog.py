"""Tests for the catalog MCP resources."""

from contextlib import contextmanager
from unittest.mock import Mock, patch

import pytest
from fastmcp.exceptions import ResourceError

from local_library.config import LibraryConfig
from local_library.database import QueryError
from local_library.models import Author, Book
from local_library.resources import (
    catalog_resources,
    get_book_details_handler,
    list_authors_handler,
)
from local_library.server import create_mcp_server


@contextmanager
def fake_session_scope():
    yield Mock()


@pytest.fixture
def patched_scope():
    with patch(
        "local_library.resources.catalog.session_scope", side_effect=fake_session_scope
    ) as scope:
        yield scope


class TestListAuthorsResource:
    @pytest.mark.asyncio
    async def test_returns_formatted_authors(self, patched_scope, sorted_authors):
        with patch("local_library.resources.catalog.AuthorRepository") as repo_class:
            repo_class.return_value.query_all.return_value = sorted_authors

            result = await list_authors_handler()

        assert result == {
            "authors": [
                "Austen, Jane: 1775 - 1817",
                "Ghosh, Amitav: 1835 - 1910",
                "Tagore, Rabindranath: 1812 - 1870",
            ]
        }
        patched_scope.assert_called_once()

    @pytest.mark.asyncio
    async def test_empty_catalog_returns_message(self, patched_scope):
        with patch("local_library.resources.catalog.AuthorRepository") as repo_class:
            repo_class.return_value.query_all.return_value = []

            result = await list_authors_handler()

        assert result == {"authors": [], "message": "No authors found"}


class TestBookDetailsResource:
    @pytest.mark.asyncio
    async def test_returns_book_details(self, patched_scope, mock_copies):
        book = Book(
            id="b1",
            title="Foundation",
            author=Author(id="a1", first_name="Isaac", family_name="Asimov"),
        )
        with (
            patch("local_library.resources.catalog.BookRepository") as book_class,
            patch("local_library.resources.catalog.BookInstanceRepository") as copy_class,
        ):
            book_class.return_value.query_one.return_value = book
            copy_class.return_value.query_where.return_value = mock_copies

            result = await get_book_details_handler("b1")

        assert result == {
            "title": "Foundation",
            "author": "Asimov, Isaac",
            "copies": mock_copies,
        }

    @pytest.mark.asyncio
    async def test_missing_book_raises_resource_error(self, patched_scope):
        with (
            patch("local_library.resources.catalog.BookRepository") as book_class,
            patch("local_library.resources.catalog.BookInstanceRepository") as copy_class,
        ):
            book_class.return_value.query_one.return_value = None
            copy_class.return_value.query_where.return_value = []

            with pytest.raises(ResourceError, match="Book missing not found"):
                await get_book_details_handler("missing")

    @pytest.mark.asyncio
    async def test_query_failure_raises_resource_error(self, patched_scope):
        with (
            patch("local_library.resources.catalog.BookRepository") as book_class,
            patch("local_library.resources.catalog.BookInstanceRepository"),
        ):
            book_class.return_value.query_one.side_effect = QueryError("Database error")

            with pytest.raises(ResourceError, match="Error fetching book b1"):
                await get_book_details_handler("b1")


class TestResourceRegistration:
    def test_resource_uris(self):
        uris = {resource["uri"] for resource in catalog_resources}

        assert uris == {"library://authors/list", "library://books/{book_id}/details"}

    def test_create_mcp_server(self, tmp_path):
        config = LibraryConfig(server_name="mcp-test", database_path=tmp_path / "mcp.db")

        mcp = create_mcp_server(config)

        assert mcp.name == "mcp-test"
