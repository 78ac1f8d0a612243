from abc import ABC, abstractmethod

from bookfinder.models import BookRecord


class BookSearchError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class BookSearchClient(ABC):
    @abstractmethod
    async def search(
        self, title: str | None, author: str | None, limit: int = 30
    ) -> list[BookRecord]:
        """Return matching records in the provider's relevance order.

        Raises BookSearchError when the provider cannot be reached or answers
        with a non-success status.
        """
        ...

    async def aclose(self) -> None:
        return None

    @staticmethod
    def build_params(title: str | None, author: str | None, limit: int) -> dict[str, str | int]:
        params: dict[str, str | int] = {}
        if title:
            params["title"] = title
        if author:
            params["author"] = author
        params["limit"] = limit
        return params
