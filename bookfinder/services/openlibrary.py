import logging

import httpx
from pydantic import ValidationError

from bookfinder.config import settings
from bookfinder.interfaces.book_search import BookSearchClient, BookSearchError
from bookfinder.models import BookRecord

logger = logging.getLogger(__name__)


class OpenLibraryClient(BookSearchClient):
    SEARCH_PATH = "/search.json"

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._client = client
        self._base_url = base_url or settings.openlibrary_base_url
        self._timeout = httpx.Timeout(timeout or settings.request_timeout)

    async def search(
        self, title: str | None, author: str | None, limit: int = 30
    ) -> list[BookRecord]:
        params = self.build_params(title, author, limit)
        url = f"{self._base_url}{self.SEARCH_PATH}"
        logger.debug("Searching Open Library: %s params=%s", url, params)

        try:
            if self._client is not None:
                response = await self._get(self._client, url, params)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await self._get(client, url, params)
        except httpx.HTTPError as e:
            logger.warning("Open Library request failed: %s", e)
            raise BookSearchError(str(e)) from e

        if not response.is_success:
            logger.warning("Open Library returned status %s", response.status_code)
            raise BookSearchError(
                f"Request failed: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise BookSearchError(f"Invalid response: {e}") from e

        docs = payload.get("docs") if isinstance(payload, dict) else None
        records = []
        for doc in docs or []:
            if not isinstance(doc, dict):
                continue
            try:
                records.append(BookRecord.from_doc(doc))
            except ValidationError as e:
                logger.warning("Skipping malformed doc %s: %s", doc.get("key"), e)
        logger.info("Open Library search returned %d docs", len(records))
        return records

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()

    async def _get(
        self, client: httpx.AsyncClient, url: str, params: dict[str, str | int]
    ) -> httpx.Response:
        return await client.get(
            url,
            params=params,
            headers={"User-Agent": settings.user_agent},
            timeout=self._timeout,
        )
