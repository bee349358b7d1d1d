from __future__ import annotations

from enum import Enum


class BookType(Enum):
    """Formats a book can be sold in."""
    EBOOK = "eBook"
    PHYSICAL = "Physical"
    RENTAL = "Rental"


class Author:
    """A single entry in the author registry."""

    def __init__(self, name: str, number_of_books_written: int = 0) -> None:
        self.name = name
        self.number_of_books_written = number_of_books_written

    def __str__(self) -> str:
        return f"{self.name} ({self.number_of_books_written} books)"

    def __repr__(self) -> str:
        return f"Author(name={self.name!r}, number_of_books_written={self.number_of_books_written!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Author):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def copy(self) -> "Author":
        return Author(self.name, self.number_of_books_written)

    def to_dict(self) -> dict:
        return {"name": self.name, "number_of_books_written": self.number_of_books_written}

    @staticmethod
    def from_dict(data: dict) -> "Author":
        return Author(name=data["name"], number_of_books_written=data.get("number_of_books_written", 0))


class Book:
    """A single book in the inventory.

    The author is held as a value copy, so edits made to the author registry
    after the book was added do not show up here.
    """

    def __init__(self, name: str, book_type: BookType, num_pages: int, price: float,
                 is_in_stock: bool, is_best_selling: bool, author: Author) -> None:
        self.name = name
        self.book_type = book_type
        self.num_pages = num_pages
        self.price = price
        self.is_in_stock = is_in_stock
        self.is_best_selling = is_best_selling
        self.author = author.copy()

        # Rentals are never charged for
        if self.book_type is BookType.RENTAL:
            self.price = 0.00

    def __str__(self) -> str:
        stock = "in stock" if self.is_in_stock else "out of stock"
        return f"{self.name} by {self.author.name} [{self.book_type.value}, {self.price:.2f}, {stock}]"

    def __repr__(self) -> str:
        return f"Book(name={self.name!r}, book_type={self.book_type.value!r}, price={self.price!r})"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "book_type": self.book_type.value,
            "num_pages": self.num_pages,
            "price": self.price,
            "is_in_stock": self.is_in_stock,
            "is_best_selling": self.is_best_selling,
            "author": self.author.to_dict(),
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(
            name=data["name"],
            book_type=BookType(data["book_type"]),
            num_pages=data.get("num_pages", 0),
            price=data.get("price", 0.0),
            is_in_stock=bool(data.get("is_in_stock", False)),
            is_best_selling=bool(data.get("is_best_selling", False)),
            author=Author.from_dict(data["author"]),
        )
