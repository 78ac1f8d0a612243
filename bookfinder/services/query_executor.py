import logging

from bookfinder.config import settings
from bookfinder.interfaces.book_search import BookSearchClient, BookSearchError
from bookfinder.models import ErrorKind, SearchResultSet

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No books found 😔"
GENERIC_ERROR_MESSAGE = "Something went wrong"


class QueryExecutor:
    def __init__(self, book_search: BookSearchClient, limit: int | None = None) -> None:
        self._search = book_search
        self._limit = limit or settings.result_limit

    @staticmethod
    def normalize_terms(title: str | None, author: str | None) -> tuple[str, str]:
        return (title or "").strip(), (author or "").strip()

    async def execute(self, title: str | None, author: str | None) -> SearchResultSet | None:
        """Run one search and fold its outcome into a fresh result set.

        Returns None without touching the network when both terms are blank.
        """
        title, author = self.normalize_terms(title, author)
        if not title and not author:
            return None

        try:
            records = await self._search.search(title or None, author or None, limit=self._limit)
        except BookSearchError as e:
            return SearchResultSet(
                error=str(e) or GENERIC_ERROR_MESSAGE,
                error_kind=ErrorKind.TRANSPORT,
            )

        if not records:
            logger.info("No results for title=%r author=%r", title, author)
            return SearchResultSet(error=NO_RESULTS_MESSAGE, error_kind=ErrorKind.EMPTY)

        return SearchResultSet(records=records)

    async def aclose(self) -> None:
        await self._search.aclose()
