import logging
from typing import Any, Dict, List, Optional, Tuple

from bookstore.book import Author, Book, BookType
from bookstore.config import settings
from bookstore.exceptions import NotFoundError, ValidationError
from bookstore.validators import AuthorValidator, BookValidator

logger = logging.getLogger(__name__)


class Bookstore:
    """Holds the author registry and the book inventory in memory.

    Both lists keep insertion order and allow duplicate names. Lookups for
    update and delete act on the first entry whose name matches. Not safe for
    use from several threads at once.
    """

    def __init__(self) -> None:
        self.authors: List[Author] = []
        self.books: List[Book] = []

    # ------------------------- Books ------------------------- #
    def add_book_to_inventory(self, name: str, book_type: BookType, num_pages: int, price: float,
                              is_in_stock: bool, is_best_selling: bool, author: Author) -> None:
        """Validate and append a new book. Rentals are stored with a price of 0.00."""
        try:
            BookValidator.validate(name, num_pages, price)
        except ValidationError as e:
            logger.warning(f"Rejected book {name!r}: {e}")
            raise

        book = Book(name, book_type, num_pages, price, is_in_stock, is_best_selling, author)
        self.books.append(book)
        logger.info(f"Book added: {book.name} ({book.book_type.value}, price={book.price:.2f})")

    def update_book_in_inventory(self, name: str, book_type: BookType, num_pages: int, price: float,
                                 is_in_stock: bool, is_best_selling: bool, author: Author) -> None:
        """Replace the first book called ``name`` with a record built from the given fields."""
        try:
            BookValidator.validate(name, num_pages, price)
        except ValidationError as e:
            logger.warning(f"Rejected update for book {name!r}: {e}")
            raise

        updated = Book(name, book_type, num_pages, price, is_in_stock, is_best_selling, author)
        index = self._book_index(name)
        if index is None:
            logger.warning(f"Update failed, book not found: {name!r}")
            raise NotFoundError("Book not found in inventory, try again.")

        self.books[index] = updated
        logger.info(f"Book updated: {name}")

    def delete_book_in_inventory(self, name: str) -> None:
        BookValidator.validate_name(name)

        index = self._book_index(name)
        if index is None:
            logger.warning(f"Delete failed, book not found: {name!r}")
            raise NotFoundError("Book not found in inventory, try again.")

        del self.books[index]
        logger.info(f"Book deleted: {name}")

    def count_books_available(self) -> Tuple[int, int]:
        """Return (in stock, out of stock) counts over the whole inventory."""
        in_stock, out_of_stock = 0, 0
        for book in self.books:
            if book.is_in_stock:
                in_stock += 1
            else:
                out_of_stock += 1
        return in_stock, out_of_stock

    def find_book(self, name: str) -> Optional[Book]:
        index = self._book_index(name)
        return self.books[index] if index is not None else None

    def list_books(self) -> List[Book]:
        return list(self.books)

    # ------------------------- Authors ------------------------- #
    def add_author_to_list(self, name: str, number_of_books_written: int) -> None:
        if settings.validate_authors:
            try:
                AuthorValidator.validate(name, number_of_books_written)
            except ValidationError as e:
                logger.warning(f"Rejected author {name!r}: {e}")
                raise

        self.authors.append(Author(name, number_of_books_written))
        logger.info(f"Author added: {name}")

    def update_author_in_list(self, match_name: str, author: Author) -> None:
        """Replace the first author called ``match_name`` with a copy of ``author``."""
        if settings.validate_authors:
            try:
                AuthorValidator.validate(author.name, author.number_of_books_written)
            except ValidationError as e:
                logger.warning(f"Rejected update for author {match_name!r}: {e}")
                raise

        index = self._author_index(match_name)
        if index is None:
            logger.warning(f"Update failed, author not found: {match_name!r}")
            raise NotFoundError("Author not found, please try again.")

        self.authors[index] = author.copy()
        logger.info(f"Author updated: {match_name} -> {author.name}")

    def delete_author_in_inventory(self, name: str) -> None:
        AuthorValidator.validate_name(name)

        index = self._author_index(name)
        if index is None:
            logger.warning(f"Delete failed, author not found: {name!r}")
            raise NotFoundError("Author not found in inventory, try again.")

        del self.authors[index]
        logger.info(f"Author deleted: {name}")

    def find_author(self, name: str) -> Optional[Author]:
        index = self._author_index(name)
        return self.authors[index] if index is not None else None

    def list_authors(self) -> List[Author]:
        return list(self.authors)

    # ------------------------- Serialization ------------------------- #
    def to_dict(self) -> Dict[str, Any]:
        return {
            "authors": [a.to_dict() for a in self.authors],
            "books": [b.to_dict() for b in self.books],
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Bookstore":
        """Build a store by replaying adds, so seed data gets the same checks as callers."""
        store = Bookstore()
        for item in data.get("authors", []) or []:
            store.add_author_to_list(item["name"], item.get("number_of_books_written", 0))
        for item in data.get("books", []) or []:
            store.add_book_from_dict(item)
        return store

    def add_book_from_dict(self, item: Dict[str, Any]) -> None:
        # The raw price is validated here; Book.from_dict would already have zeroed a rental's price
        self.add_book_to_inventory(
            item.get("name", ""),
            BookType(item["book_type"]),
            item.get("num_pages", 0),
            item.get("price", 0.0),
            bool(item.get("is_in_stock", False)),
            bool(item.get("is_best_selling", False)),
            Author.from_dict(item["author"]),
        )

    # ------------------------- Utilities ------------------------- #
    def _book_index(self, name: str) -> Optional[int]:
        for i, book in enumerate(self.books):
            if book.name == name:
                return i
        return None

    def _author_index(self, name: str) -> Optional[int]:
        for i, author in enumerate(self.authors):
            if author.name == name:
                return i
        return None
