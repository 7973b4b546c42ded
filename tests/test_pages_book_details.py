"""Tests for the book detail page."""

from types import SimpleNamespace

import pytest

from local_library.database import QueryError
from local_library.models import Author, Book
from local_library.pages import show_book_details


class TestShowBookDetails:
    @pytest.mark.asyncio
    async def test_sends_book_with_copies(
        self, response, book_repo, copy_repo, mock_book, mock_copies
    ):
        book_repo.query_one.return_value = mock_book
        copy_repo.query_where.return_value = mock_copies

        await show_book_details(response, "12345", book_repo, copy_repo)

        book_repo.query_one.assert_called_once_with({"_id": "12345"}, populate=["author"])
        copy_repo.query_where.assert_called_once_with(
            {"book": "12345"}, projection="imprint status"
        )
        response.send.assert_called_once_with(
            {"title": "Mock Book Title", "author": "Author, Mock", "copies": mock_copies}
        )
        response.status.assert_not_called()

    @pytest.mark.asyncio
    async def test_404_when_copies_result_is_none(self, response, book_repo, copy_repo, mock_book):
        book_repo.query_one.return_value = mock_book
        copy_repo.query_where.return_value = None

        await show_book_details(response, "12345", book_repo, copy_repo)

        response.status.assert_called_once_with(404)
        response.send.assert_called_once_with("Book 12345 not found")

    @pytest.mark.asyncio
    async def test_500_when_book_query_fails(self, response, book_repo, copy_repo):
        book_repo.query_one.side_effect = QueryError("Database error")

        await show_book_details(response, "12345", book_repo, copy_repo)

        response.status.assert_called_once_with(500)
        response.send.assert_called_once_with("Error fetching book 12345")
        copy_repo.query_where.assert_not_called()

    @pytest.mark.asyncio
    async def test_500_when_copies_query_fails(self, response, book_repo, copy_repo, mock_book):
        book_repo.query_one.return_value = mock_book
        copy_repo.query_where.side_effect = RuntimeError("Database error fetching book instance")

        await show_book_details(response, "12345", book_repo, copy_repo)

        response.status.assert_called_once_with(500)
        response.send.assert_called_once_with("Error fetching book 12345")

    @pytest.mark.asyncio
    async def test_404_when_book_is_none(self, response, book_repo, copy_repo, mock_copies):
        book_repo.query_one.return_value = None
        copy_repo.query_where.return_value = mock_copies

        await show_book_details(response, "12345", book_repo, copy_repo)

        response.status.assert_called_once_with(404)
        response.send.assert_called_once_with("Book 12345 not found")

    @pytest.mark.asyncio
    async def test_404_for_non_string_id_without_querying(self, response, book_repo, copy_repo):
        book_id = {"id": "12345"}

        await show_book_details(response, book_id, book_repo, copy_repo)

        response.status.assert_called_once_with(404)
        response.send.assert_called_once_with(f"Book {book_id} not found")
        book_repo.query_one.assert_not_called()
        copy_repo.query_where.assert_not_called()

    @pytest.mark.asyncio
    async def test_404_for_integer_id(self, response, book_repo, copy_repo):
        await show_book_details(response, 12345, book_repo, copy_repo)

        response.status.assert_called_once_with(404)
        response.send.assert_called_once_with("Book 12345 not found")

    @pytest.mark.asyncio
    async def test_existing_book_without_copies(self, response, book_repo, copy_repo):
        book_repo.query_one.return_value = Book(
            id="12345",
            title="Book Title",
            author=Author(id="a1", first_name="Name", family_name="Author"),
        )
        copy_repo.query_where.return_value = []

        await show_book_details(response, "12345", book_repo, copy_repo)

        response.send.assert_called_once_with(
            {"title": "Book Title", "author": "Author, Name", "copies": []}
        )
        response.status.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_title_and_author_pass_through_as_none(
        self, response, book_repo, copy_repo, mock_copies
    ):
        book_repo.query_one.return_value = Book(id="12345", title=None, author=None)
        copy_repo.query_where.return_value = mock_copies

        await show_book_details(response, "12345", book_repo, copy_repo)

        response.send.assert_called_once_with(
            {"title": None, "author": None, "copies": mock_copies}
        )

    @pytest.mark.asyncio
    async def test_multiple_copies(self, response, book_repo, copy_repo, mock_book):
        copies = [
            {"imprint": "First Edition", "status": "Available"},
            {"imprint": "Second Edition", "status": "Loaned"},
            {"imprint": "Third Edition", "status": "Available"},
        ]
        book_repo.query_one.return_value = mock_book
        copy_repo.query_where.return_value = copies

        await show_book_details(response, "12345", book_repo, copy_repo)

        sent = response.send.call_args.args[0]
        assert sent["copies"] == copies
        assert len(sent["copies"]) == 3

    @pytest.mark.asyncio
    async def test_failing_response_does_not_raise(
        self, response, book_repo, copy_repo, mock_book, mock_copies
    ):
        book_repo.query_one.return_value = mock_book
        copy_repo.query_where.return_value = mock_copies
        response.send.side_effect = RuntimeError("Response error")

        await show_book_details(response, "12345", book_repo, copy_repo)

        response.send.assert_called_once()

    @pytest.mark.asyncio
    async def test_500_when_book_record_cannot_be_read(
        self, response, book_repo, copy_repo, mock_copies
    ):
        book_repo.query_one.return_value = SimpleNamespace(title="Untitled")
        copy_repo.query_where.return_value = mock_copies

        await show_book_details(response, "12345", book_repo, copy_repo)

        response.status.assert_called_once_with(500)
        response.send.assert_called_once_with("Error fetching book 12345")

    @pytest.mark.asyncio
    async def test_author_without_first_name_sends_empty_name(
        self, response, book_repo, copy_repo, mock_copies
    ):
        book_repo.query_one.return_value = Book(
            id="12345",
            title="Book Title",
            author=Author(id="a1", first_name="", family_name="Author"),
        )
        copy_repo.query_where.return_value = mock_copies

        await show_book_details(response, "12345", book_repo, copy_repo)

        response.send.assert_called_once_with(
            {"title": "Book Title", "author": "", "copies": mock_copies}
        )
        response.status.assert_not_called()
