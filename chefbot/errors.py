"""
Exception types for the chefbot core.

These exceptions are raised inside the connector and storage layers. The
public boundary (chefbot.fetch and chefbot.bookmarks) converts them into
result values, so UI code never has to catch them.

Hierarchy:
- ChefbotError
  - NetworkError: transport failure, timeout, non-2xx status or non-JSON body
  - EmptyResultError: successful response that carried no usable recipe
  - NotFoundError: lookup by id found nothing upstream
  - StorageError
    - StorageReadError: the local store could not be read or parsed
      - UnsupportedFormatError: persisted data uses a newer format version
    - StorageWriteError: the local store could not be written
"""

from typing import Optional


class ChefbotError(Exception):
    """Base class for all chefbot errors."""
    pass


class NetworkError(ChefbotError):
    """
    Exception raised when a request to the recipe API fails.

    This exception is raised when:
    - The request times out or cannot connect
    - The API returns a non-2xx status
    - The response body is not valid JSON

    Attributes:
        status_code: HTTP status code if a response was received, otherwise None
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EmptyResultError(ChefbotError):
    """Raised when a random draw returns a well-formed response with no recipe in it."""
    pass


class NotFoundError(ChefbotError):
    """Raised when a recipe id does not exist upstream."""

    def __init__(self, recipe_id: str) -> None:
        super().__init__(f"Recipe {recipe_id!r} was not found")
        self.recipe_id = recipe_id


class StorageError(ChefbotError):
    pass


class StorageReadError(StorageError):
    pass


class StorageWriteError(StorageError):
    pass


class UnsupportedFormatError(StorageReadError):
    """Raised when persisted data was written by a newer, unknown format version."""

    def __init__(self, version: int) -> None:
        super().__init__(f"Unsupported bookmark format version {version}")
        self.version = version
