class BookstoreError(Exception):
    """Base class for errors raised by inventory operations."""


class ValidationError(BookstoreError, ValueError):
    """Input failed a precondition; the store was left unchanged."""


class NotFoundError(BookstoreError, LookupError):
    """An update or delete targeted a name that is not in the store."""
