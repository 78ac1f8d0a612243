from bookfinder.config import settings
from bookfinder.models import (
    BookCard,
    Projection,
    SearchResultSet,
    SortKey,
    ViewParameters,
)
from bookfinder.services.presenter import to_cards
from bookfinder.services.projector import clamp_page, project
from bookfinder.services.query_executor import QueryExecutor


class BrowsingSession:
    """Caller-side state for one browsing session.

    Holds the latest result set and the view parameters and applies the
    transitions around them: a completed search or a change of year bounds or
    sort order sends the view back to page 1, and page navigation is clamped
    to the pages that exist. When searches overlap, only the most recently
    submitted one is applied.
    """

    def __init__(self, executor: QueryExecutor, page_size: int | None = None) -> None:
        self._executor = executor
        self.results = SearchResultSet()
        self.params = ViewParameters(page_size=page_size or settings.page_size)
        self._generation = 0
        self._in_flight = 0
        self._cache: tuple[SearchResultSet, ViewParameters, Projection] | None = None

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    async def submit(self, title: str | None, author: str | None) -> bool:
        """Run a search; return True if its result was applied."""
        title, author = QueryExecutor.normalize_terms(title, author)
        if not title and not author:
            return False

        self._generation += 1
        generation = self._generation
        self._in_flight += 1
        try:
            result = await self._executor.execute(title, author)
        finally:
            self._in_flight -= 1

        if result is None or generation != self._generation:
            return False
        self.results = result
        self._update(page_number=1)
        return True

    def set_year_bounds(self, min_year: int | None, max_year: int | None) -> None:
        self._update(min_year=min_year, max_year=max_year, page_number=1)

    def set_sort_key(self, sort_key: SortKey) -> None:
        self._update(sort_key=SortKey(sort_key), page_number=1)

    def go_to_page(self, page_number: int) -> None:
        self._update(page_number=clamp_page(page_number, self.projection.page_count))

    def next_page(self) -> None:
        self.go_to_page(self.params.page_number + 1)

    def previous_page(self) -> None:
        self.go_to_page(self.params.page_number - 1)

    @property
    def projection(self) -> Projection:
        cached = self._cache
        if cached is not None and cached[0] is self.results and cached[1] == self.params:
            return cached[2]
        projection = project(self.results.records, self.params)
        self._cache = (self.results, self.params, projection)
        return projection

    @property
    def cards(self) -> list[BookCard]:
        return to_cards(self.projection.page_items)

    def _update(self, **changes) -> None:
        self.params = self.params.model_copy(update=changes)
