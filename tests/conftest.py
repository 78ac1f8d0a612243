import pytest

from bookfinder.interfaces.book_search import BookSearchClient
from bookfinder.models import BookRecord


class MockBookSearchClient(BookSearchClient):
    def __init__(self, results: list[BookRecord] | None = None, error: Exception | None = None):
        self._results = results or []
        self._error = error
        self.calls: list[tuple[str | None, str | None, int]] = []
        self.closed = False

    async def search(
        self, title: str | None, author: str | None, limit: int = 30
    ) -> list[BookRecord]:
        self.calls.append((title, author, limit))
        if self._error:
            raise self._error
        return self._results

    async def aclose(self) -> None:
        self.closed = True


def make_records(count: int, start_year: int = 1980) -> list[BookRecord]:
    return [
        BookRecord(
            title=f"Book {i:02d}",
            author_names=(f"Author {i}",),
            first_publish_year=start_year + i,
            cover_id=1000 + i,
            key=f"/works/OL{i}W",
        )
        for i in range(count)
    ]


@pytest.fixture
def sample_docs() -> list[dict]:
    return [
        {
            "key": "/works/OL27448W",
            "title": "The Lord of the Rings",
            "author_name": ["J.R.R. Tolkien"],
            "first_publish_year": 1954,
            "cover_i": 14625765,
        },
        {
            "key": "/works/OL262758W",
            "title": "The Hobbit",
            "author_name": ["J.R.R. Tolkien"],
            "first_publish_year": 1937,
            "cover_i": 14627509,
        },
        {
            "key": "/works/OL45804W",
            "title": "Fellowship Companion",
        },
    ]


@pytest.fixture
def sample_records(sample_docs) -> list[BookRecord]:
    return [BookRecord.from_doc(doc) for doc in sample_docs]


@pytest.fixture
def mixed_year_records() -> list[BookRecord]:
    return [
        BookRecord(title="Zebra", first_publish_year=1995, key="/works/A"),
        BookRecord(title="apple", first_publish_year=None, key="/works/B"),
        BookRecord(title="Mango", first_publish_year=1985, key="/works/C"),
        BookRecord(title=None, first_publish_year=2005, key="/works/D"),
        BookRecord(title="Éclair", first_publish_year=1990, key="/works/E"),
        BookRecord(title="banana", first_publish_year=2000, key="/works/F"),
    ]
