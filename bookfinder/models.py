from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


class BookRecord(CamelModel):
    model_config = ConfigDict(frozen=True)

    title: str | None = None
    author_names: tuple[str, ...] | None = None
    first_publish_year: int | None = None
    cover_id: int | None = None
    key: str | None = None

    @field_validator("author_names", mode="before")
    @classmethod
    def _single_author(cls, value):
        if isinstance(value, str):
            return (value,)
        return value

    @classmethod
    def from_doc(cls, doc: dict) -> "BookRecord":
        """Build a record from one raw ``search.json`` document."""
        return cls(
            title=doc.get("title"),
            author_names=doc.get("author_name"),
            first_publish_year=doc.get("first_publish_year"),
            cover_id=doc.get("cover_i"),
            key=doc.get("key"),
        )


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    EMPTY = "empty"


class SearchResultSet(CamelModel):
    records: list[BookRecord] = []
    error: str | None = None
    error_kind: ErrorKind | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


class SortKey(str, Enum):
    RELEVANCE = "relevance"
    YEAR_ASC = "year_asc"
    YEAR_DESC = "year_desc"
    TITLE = "title"


class ViewParameters(CamelModel):
    model_config = ConfigDict(frozen=True)

    min_year: int | None = None
    max_year: int | None = None
    sort_key: SortKey = SortKey.RELEVANCE
    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)


class Projection(CamelModel):
    page_items: list[BookRecord]
    page_count: int


class BookCard(CamelModel):
    display_key: str
    title: str
    authors: str
    year: str
    cover_url: str
    has_cover: bool
    detail_url: str | None = None


class BooksPage(CamelModel):
    cards: list[BookCard] = []
    page: int = 1
    page_count: int = 0
    total_results: int = 0
    message: str | None = None


class HealthResponse(CamelModel):
    status: str
    version: str
