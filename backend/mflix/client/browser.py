"""
Catalog browser state machine.

Holds paging / sort / search state and drives listing requests through a
`CatalogClient`:

    idle → loading → success | error      (re-entered on every change)

• search input is debounced (500 ms of quiet) and resets to page 1
• a sort change resets to page 1
• first / prev / next / last are no-ops at the matching boundary
• every load takes a generation number; a response that arrives after a
  newer load was started is dropped instead of overwriting fresher state
"""
from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass

import httpx

from .api import CatalogClient

log = logging.getLogger(__name__)

PAGE_SIZE = 10
SEARCH_DEBOUNCE = 0.5
LOAD_ERROR = "Failed to load movies"


class Status(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SortOption:
    label: str
    sort_by: str
    sort_order: str


SORT_OPTIONS = {
    "title": SortOption("Title (A-Z)", "title", "asc"),
    "year": SortOption("Year (Newest)", "year", "desc"),
}


class CatalogBrowser:
    def __init__(
        self,
        client: CatalogClient,
        *,
        page_size: int = PAGE_SIZE,
        debounce: float = SEARCH_DEBOUNCE,
    ) -> None:
        self.client = client
        self.page_size = page_size
        self.debounce = debounce

        self.page = 1
        self.total_pages = 1
        self.movies: list[dict] = []
        self.status = Status.IDLE
        self.error: str | None = None
        self.search = ""          # what the user typed
        self.applied_search = ""  # what the last debounce let through
        self.sort = "title"

        self._generation = 0
        self._pending_search: asyncio.Task | None = None

    # ---------------------------------------------------------------- loading
    async def load(self) -> None:
        self._generation += 1
        generation = self._generation
        self.status = Status.LOADING
        self.error = None

        option = SORT_OPTIONS[self.sort]
        try:
            data = await self.client.list_movies(
                page=self.page,
                limit=self.page_size,
                search=self.applied_search,
                sort_by=option.sort_by,
                sort_order=option.sort_order,
            )
        # ValueError: a 2xx whose body is not JSON
        except (httpx.HTTPStatusError, httpx.RequestError, ValueError) as exc:
            if generation != self._generation:
                return
            log.warning("failed to fetch movies: %s", exc)
            self.movies = []
            self.error = LOAD_ERROR
            self.status = Status.ERROR
            return

        if generation != self._generation:
            log.debug("dropping stale response for generation %d", generation)
            return
        self.movies = data.get("movies") or []
        self.total_pages = data.get("totalPages") or 1
        self.status = Status.SUCCESS

    # ----------------------------------------------------------------- search
    def set_search(self, text: str) -> asyncio.Task:
        """
        Record a keystroke. Only the trailing call after `debounce` seconds
        of quiet applies the term; returns that (cancellable) task.
        """
        self.search = text
        if self._pending_search is not None and not self._pending_search.done():
            self._pending_search.cancel()
        self._pending_search = asyncio.ensure_future(self._apply_search_later(text))
        return self._pending_search

    async def _apply_search_later(self, text: str) -> None:
        await asyncio.sleep(self.debounce)
        self.applied_search = text
        self.page = 1
        await self.load()

    # ------------------------------------------------------------ sort/paging
    async def set_sort(self, sort: str) -> None:
        if sort not in SORT_OPTIONS:
            raise ValueError(f"unknown sort option {sort!r}")
        self.sort = sort
        self.page = 1
        await self.load()

    @property
    def can_go_back(self) -> bool:
        return self.page > 1

    @property
    def can_go_forward(self) -> bool:
        return self.page < self.total_pages

    async def go_to(self, page: int) -> None:
        page = max(1, min(page, self.total_pages))
        if page == self.page:
            return
        self.page = page
        await self.load()

    async def first(self) -> None:
        if self.can_go_back:
            await self.go_to(1)

    async def prev(self) -> None:
        if self.can_go_back:
            await self.go_to(self.page - 1)

    async def next(self) -> None:
        if self.can_go_forward:
            await self.go_to(self.page + 1)

    async def last(self) -> None:
        if self.can_go_forward:
            await self.go_to(self.total_pages)

    # ----------------------------------------------------------------- render
    def render(self) -> list[str]:
        """Plain-text view of the current state."""
        if self.status is Status.LOADING:
            return ["Loading..."]
        if self.status is Status.ERROR:
            return [self.error or LOAD_ERROR]
        lines = [f"{m.get('title', '(untitled)')} ({m.get('year', '?')})" for m in self.movies]
        if not lines and self.status is Status.SUCCESS:
            lines.append("No movies found")
        lines.append(f"Page {self.page} of {self.total_pages}")
        return lines
