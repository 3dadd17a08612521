"""
Movie-centric helpers:
• build_filter / build_sort – turn listing query-params into Mongo specs
• MovieService.list         – one page of movies + total page count
• MovieService.get          – single movie by ObjectId
• MovieService.update       – partial `$set` of allow-listed fields
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from ..core.errors import BadRequest, NotFound
from ..models.movie import MoviePage, MovieUpdate

log = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
# skip/limit travel to the server as BSON int64
MAX_INT64 = 2 ** 63 - 1

_DIRECTIONS = {
    "asc": ASCENDING,
    "ascending": ASCENDING,
    "1": ASCENDING,
    "desc": DESCENDING,
    "descending": DESCENDING,
    "-1": DESCENDING,
}

SortSpec = List[Tuple[str, int]]


# ────────────────────────── query building ─────────────────────────────
def positive_int(raw: Any, default: int) -> int:
    """Parse a query-param as an int ≥ 1, falling back to *default*."""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if value >= 1 else default


def _split(csv: Optional[str]) -> List[str]:
    return [part.strip() for part in (csv or "").split(",")]


def build_sort(sort_by: Optional[str], sort_order: Optional[str]) -> SortSpec:
    """
    `sortBy` and `sortOrder` are parallel comma-separated lists.

    Each field takes the direction at the same position; a missing or
    unrecognised direction means ascending. Blank field names are skipped
    without shifting the alignment.

    >>> build_sort("year,title", "desc")
    [('year', -1), ('title', 1)]
    """
    orders = _split(sort_order)
    spec: SortSpec = []
    for i, field in enumerate(_split(sort_by)):
        if not field:
            continue
        order = orders[i].lower() if i < len(orders) else ""
        spec.append((field, _DIRECTIONS.get(order, ASCENDING)))
    return spec


def build_filter(search: Optional[str]) -> Dict[str, Any]:
    """Case-insensitive substring match on title; empty term → everything."""
    term = (search or "").strip()
    if not term:
        return {}
    return {"title": {"$regex": re.escape(term), "$options": "i"}}


def parse_object_id(raw: str) -> ObjectId:
    if not ObjectId.is_valid(raw):
        raise BadRequest("Invalid movie id")
    return ObjectId(raw)


def to_public(doc: dict) -> dict:
    """Swap Mongo's `_id` for a string `id` so the doc is JSON-safe."""
    out = dict(doc)
    if "_id" in out:
        out["id"] = str(out.pop("_id"))
    return out


# ────────────────────────── service ────────────────────────────────────
class MovieService:
    def __init__(self, movies):
        self.movies = movies

    async def list(
        self,
        page: Any = None,
        limit: Any = None,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> MoviePage:
        page = positive_int(page, DEFAULT_PAGE)
        limit = positive_int(limit, DEFAULT_LIMIT)
        query = build_filter(search)
        sort = build_sort(sort_by, sort_order)

        total = await self.movies.count_documents(query)
        skip = (page - 1) * limit
        if skip >= total:
            docs = []
        else:
            cursor = self.movies.find(
                query,
                sort=sort or None,
                skip=skip,
                limit=min(limit, MAX_INT64),
            )
            docs = await cursor.to_list(length=None)
        log.debug("listed %d/%d movies page=%d limit=%d sort=%s", len(docs), total, page, limit, sort)
        return MoviePage(
            movies=[to_public(d) for d in docs],
            totalPages=-(-total // limit),
        )

    async def get(self, movie_id: str) -> dict:
        oid = parse_object_id(movie_id)
        doc = await self.movies.find_one({"_id": oid})
        if not doc:
            raise NotFound("Movie not found")
        return to_public(doc)

    async def update(self, movie_id: str, payload: MovieUpdate) -> None:
        """
        Merge the supplied fields into one movie (last write wins).
        """
        oid = parse_object_id(movie_id)
        changes = payload.changes()
        if not changes:
            raise BadRequest("No updatable fields supplied")
        res = await self.movies.update_one({"_id": oid}, {"$set": changes})
        if res.matched_count == 0:
            raise NotFound("Movie not found")
        log.info("updated movie %s fields=%s", movie_id, sorted(changes))
