from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, HTTPException, Query

from bookfinder.config import settings
from bookfinder.models import BooksPage, HealthResponse, SortKey, ViewParameters
from bookfinder.services.openlibrary import OpenLibraryClient
from bookfinder.services.presenter import to_cards
from bookfinder.services.projector import clamp_page, filter_and_sort, page_count_for, paginate
from bookfinder.services.query_executor import QueryExecutor

VERSION = "0.1.0"
EMPTY_PAGE_MESSAGE = "No books to display. Try searching something else."

executor: QueryExecutor | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global executor
    http_client = httpx.AsyncClient(timeout=settings.request_timeout)
    executor = QueryExecutor(OpenLibraryClient(client=http_client))
    yield
    await executor.aclose()
    executor = None


app = FastAPI(title="Book Finder", version=VERSION, lifespan=lifespan)


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="healthy", version=VERSION)


@app.get("/books", response_model=BooksPage)
async def search_books(
    title: str = "",
    author: str = "",
    min_year: int | None = Query(None, alias="minYear"),
    max_year: int | None = Query(None, alias="maxYear"),
    sort: SortKey = SortKey.RELEVANCE,
    page: int = Query(1, ge=1),
):
    assert executor is not None
    result = await executor.execute(title, author)
    if result is None:
        raise HTTPException(status_code=400, detail="Provide a title or an author")

    if result.is_error:
        return BooksPage(message=result.error)

    params = ViewParameters(
        min_year=min_year,
        max_year=max_year,
        sort_key=sort,
        page_size=settings.page_size,
    )
    ordered = filter_and_sort(result.records, params)
    page_count = page_count_for(len(ordered), params.page_size)
    page = clamp_page(page, page_count)
    page_items = paginate(ordered, page, params.page_size)

    return BooksPage(
        cards=to_cards(page_items),
        page=page,
        page_count=page_count,
        total_results=len(ordered),
        message=None if page_items else EMPTY_PAGE_MESSAGE,
    )
