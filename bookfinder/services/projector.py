"""Filter, sort and paginate a result set for display.

Everything here is a pure function of its arguments: input sequences are
never reordered in place and records are shared, not copied.
"""

import math
import unicodedata
from collections.abc import Sequence

from bookfinder.models import BookRecord, Projection, SortKey, ViewParameters

MISSING_YEAR_ASC = 9999
MISSING_YEAR_DESC = 0


def filter_by_year(
    records: Sequence[BookRecord],
    min_year: int | None = None,
    max_year: int | None = None,
) -> list[BookRecord]:
    """Keep records whose first publish year satisfies every bound that is set.

    A record without a year never satisfies a bound, so it is dropped as soon
    as either bound is present.
    """
    kept = []
    for record in records:
        year = record.first_publish_year
        if min_year is not None and (year is None or year < min_year):
            continue
        if max_year is not None and (year is None or year > max_year):
            continue
        kept.append(record)
    return kept


def title_sort_key(title: str | None) -> tuple[str, str]:
    text = title or ""
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    # Lowercase ahead of uppercase on case-only ties.
    return folded, text.swapcase()


def sort_records(records: Sequence[BookRecord], sort_key: SortKey) -> list[BookRecord]:
    if sort_key is SortKey.YEAR_ASC:
        return sorted(
            records,
            key=lambda r: MISSING_YEAR_ASC if r.first_publish_year is None else r.first_publish_year,
        )
    if sort_key is SortKey.YEAR_DESC:
        return sorted(
            records,
            key=lambda r: MISSING_YEAR_DESC if r.first_publish_year is None else r.first_publish_year,
            reverse=True,
        )
    if sort_key is SortKey.TITLE:
        return sorted(records, key=lambda r: title_sort_key(r.title))
    return list(records)


def page_count_for(total: int, page_size: int) -> int:
    return math.ceil(total / page_size) if total else 0


def paginate(
    records: Sequence[BookRecord], page_number: int, page_size: int
) -> list[BookRecord]:
    if page_number < 1:
        return []
    start = (page_number - 1) * page_size
    return list(records[start : start + page_size])


def clamp_page(page_number: int, page_count: int) -> int:
    return min(max(1, page_number), max(1, page_count))


def filter_and_sort(records: Sequence[BookRecord], params: ViewParameters) -> list[BookRecord]:
    filtered = filter_by_year(records, params.min_year, params.max_year)
    return sort_records(filtered, params.sort_key)


def project(records: Sequence[BookRecord], params: ViewParameters) -> Projection:
    ordered = filter_and_sort(records, params)
    return Projection(
        page_items=paginate(ordered, params.page_number, params.page_size),
        page_count=page_count_for(len(ordered), params.page_size),
    )
