"""Entity repository tests using in-memory SQLite for real database behaviour."""

import pytest

from src.paperwings.core.services import InvalidArgumentError
from src.paperwings.entities import (
    BookRepository,
    CartRepository,
    FavoriteRepository,
    TicketRepository,
    UserRepository,
)


class TestUserRepository:
    def test_add_and_get_by_uid(self, user_repository: UserRepository):
        user_repository.add(
            {"uid": "uid-ana", "name": "Ana", "lastname": "Lopez", "email": "ana@example.com"}
        )

        rows = user_repository.get_by_uid("uid-ana")

        assert len(rows) == 1
        assert rows[0]["email"] == "ana@example.com"
        assert rows[0]["phone"] is None

    def test_update_by_uid(self, user_repository: UserRepository):
        user_repository.add({"uid": "uid-ana", "name": "Ana"})

        result = user_repository.update("uid", "uid-ana", {"address": "Calle 1"})

        assert result.affected_rows == 1
        assert user_repository.get_by_uid("uid-ana")[0]["address"] == "Calle 1"

    def test_delete_by_uid(self, user_repository: UserRepository):
        user_repository.add({"uid": "uid-ana"})

        assert user_repository.delete_by_uid("uid-ana").affected_rows == 1
        assert user_repository.delete_by_uid("uid-ana").affected_rows == 0
        assert user_repository.list_all() == []


class TestBookRepository:
    @pytest.fixture
    def catalog(self, book_repository: BookRepository):
        books = [
            {"title": "Cien años de soledad", "author": "García Márquez", "language": "Spanish",
             "category": "Novel", "isbn": "9780307474728"},
            {"title": "The Hobbit", "author": "J.R.R. Tolkien", "language": "English",
             "category": "Fantasy", "isbn": "9780547928227"},
            {"title": "Dune", "author": "Frank Herbert", "language": "English",
             "category": "Science Fiction", "isbn": "9780441013593"},
        ]
        return [book_repository.add(book).inserted_id for book in books]

    def test_get_by_id(self, catalog, book_repository: BookRepository):
        rows = book_repository.get_by_id(catalog[2])

        assert rows[0]["title"] == "Dune"

    def test_search_by_each_attribute(self, catalog, book_repository: BookRepository):
        assert [b["title"] for b in book_repository.search_by_title("hobbit")] == ["The Hobbit"]
        assert [b["title"] for b in book_repository.search_by_author("Herbert")] == ["Dune"]
        assert len(book_repository.search_by_language("English")) == 2
        assert [b["title"] for b in book_repository.search_by_category("Fiction")] == ["Dune"]

    def test_isbn_search_matches_prefix_only(self, catalog, book_repository: BookRepository):
        assert len(book_repository.search_by_isbn("978")) == 3
        assert [b["title"] for b in book_repository.search_by_isbn("9780441")] == ["Dune"]
        assert book_repository.search_by_isbn("0441013593") == []

    def test_search_uses_first_given_field(self, catalog, book_repository: BookRepository):
        rows = book_repository.search({"author": "Tolkien", "language": "Spanish"})

        assert [b["title"] for b in rows] == ["The Hobbit"]

    def test_search_skips_empty_fields(self, catalog, book_repository: BookRepository):
        rows = book_repository.search({"title": "", "category": "Novel"})

        assert [b["title"] for b in rows] == ["Cien años de soledad"]

    def test_search_without_fields_is_rejected(self, book_repository: BookRepository):
        with pytest.raises(InvalidArgumentError, match="search parameter"):
            book_repository.search({"publisher": "Ace"})

    def test_delete_by_id(self, catalog, book_repository: BookRepository):
        assert book_repository.delete_by_id(catalog[0]).affected_rows == 1
        assert len(book_repository.list_all()) == 2


class TestCartRepository:
    def test_entries_by_user(self, cart_repository: CartRepository):
        cart_repository.add({"uid": "u-1", "id_book": 1, "quantity": 2})
        cart_repository.add({"uid": "u-1", "id_book": 2})
        cart_repository.add({"uid": "u-2", "id_book": 1})

        rows = cart_repository.get_by_uid("u-1")

        assert sorted(row["id_book"] for row in rows) == [1, 2]
        assert {row["id_book"]: row["quantity"] for row in rows} == {1: 2, 2: 1}

    def test_delete_by_uid_and_book(self, cart_repository: CartRepository):
        cart_repository.add({"uid": "u-1", "id_book": 1})
        cart_repository.add({"uid": "u-2", "id_book": 1})

        assert cart_repository.delete_by_uid_and_book("u-1", 1).affected_rows == 1
        assert cart_repository.delete_by_uid_and_book("u-1", 1).affected_rows == 0
        assert [row["uid"] for row in cart_repository.list_all()] == ["u-2"]

    def test_get_and_delete_by_id(self, cart_repository: CartRepository):
        entry_id = cart_repository.add({"uid": "u-1", "id_book": 5}).inserted_id

        assert cart_repository.get_by_id(entry_id)[0]["id_book"] == 5
        assert cart_repository.delete_by_id(entry_id).affected_rows == 1
        assert cart_repository.get_by_id(entry_id) == []


class TestFavoriteRepository:
    def test_favorites_by_user(self, favorite_repository: FavoriteRepository):
        favorite_repository.add({"uid": "u-1", "id_book": 3})
        favorite_repository.add({"uid": "u-1", "id_book": 4})

        assert len(favorite_repository.get_by_uid("u-1")) == 2
        assert favorite_repository.get_by_uid("u-2") == []

    def test_delete_by_uid_and_book(self, favorite_repository: FavoriteRepository):
        favorite_repository.add({"uid": "u-1", "id_book": 3})

        assert favorite_repository.delete_by_uid_and_book("u-1", "3").affected_rows == 1
        assert favorite_repository.list_all() == []


class TestTicketRepository:
    def test_tickets_by_user(self, ticket_repository: TicketRepository):
        ticket_id = ticket_repository.add(
            {"uid": "u-1", "total": 42.5, "purchase_date": "2024-05-10T12:00:00", "status": "paid"}
        ).inserted_id

        rows = ticket_repository.get_by_uid("u-1")

        assert [row["id"] for row in rows] == [ticket_id]
        assert rows[0]["status"] == "paid"

    def test_update_status(self, ticket_repository: TicketRepository):
        ticket_id = ticket_repository.add({"uid": "u-1", "status": "pending"}).inserted_id

        result = ticket_repository.update("id", ticket_id, {"status": "shipped"})

        assert result.affected_rows == 1
        assert ticket_repository.get_by_id(ticket_id)[0]["status"] == "shipped"
