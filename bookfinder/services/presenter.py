from bookfinder.config import settings
from bookfinder.models import BookCard, BookRecord

UNTITLED = "Untitled"
UNKNOWN_AUTHOR = "Unknown"
UNKNOWN_YEAR = "N/A"


def cover_url(cover_id: int | None) -> str:
    if not cover_id:
        return settings.placeholder_cover_url
    return f"{settings.covers_base_url}/{cover_id}-M.jpg"


def detail_url(key: str | None) -> str | None:
    if not key:
        return None
    return f"{settings.openlibrary_base_url}{key}"


def format_authors(author_names: tuple[str, ...] | None) -> str:
    if not author_names:
        return UNKNOWN_AUTHOR
    return ", ".join(author_names)


def format_year(year: int | None) -> str:
    return UNKNOWN_YEAR if year is None else str(year)


def to_card(record: BookRecord, index: int) -> BookCard:
    # Keys are usually unique within a page but not guaranteed to be.
    return BookCard(
        display_key=f"{record.key or ''}-{index}",
        title=record.title or UNTITLED,
        authors=format_authors(record.author_names),
        year=format_year(record.first_publish_year),
        cover_url=cover_url(record.cover_id),
        has_cover=bool(record.cover_id),
        detail_url=detail_url(record.key),
    )


def to_cards(records: list[BookRecord]) -> list[BookCard]:
    return [to_card(record, idx) for idx, record in enumerate(records)]
