from typing import Optional

from bookstore.exceptions import ValidationError


class BookValidator:
    """Field checks applied before a book is added or replaced."""

    @staticmethod
    def validate_name(name: Optional[str]) -> None:
        if not name:
            raise ValidationError("Cannot have a blank name for this book. Please enter a book title.")

    @staticmethod
    def validate(name: Optional[str], num_pages: int, price: float) -> None:
        BookValidator.validate_name(name)
        if num_pages < 0:
            raise ValidationError("Pages cannot be negative. Check your entry and try again.")
        # Checked against the supplied price, before any rental override
        if price < 0:
            raise ValidationError("Price cannot be less than zero. Check your entry and try again.")


class AuthorValidator:
    """Field checks for the author registry.

    Name checks always guard deletes; the full check only runs on add/update
    when ``settings.validate_authors`` is switched on.
    """

    @staticmethod
    def validate_name(name: Optional[str]) -> None:
        if not name:
            raise ValidationError("Cannot have a blank name for this author. Please enter an author name.")

    @staticmethod
    def validate(name: Optional[str], number_of_books_written: int) -> None:
        AuthorValidator.validate_name(name)
        if number_of_books_written < 0:
            raise ValidationError("Number of books written cannot be negative. Check your entry and try again.")
