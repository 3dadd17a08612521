import asyncio

import httpx
import pytest

from mflix.client import CatalogBrowser, CatalogClient, Status
from mflix.client.browser import LOAD_ERROR

TITLES = [f"Movie {i:02d}" for i in range(25)]


class FakeApi:
    """Serves /api/movies from TITLES and records every request."""

    def __init__(self, slow_pages=(), fail=False):
        self.requests: list[httpx.QueryParams] = []
        self.slow_pages = set(slow_pages)
        self.fail = fail

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        params = request.url.params
        self.requests.append(params)
        if self.fail:
            return httpx.Response(500, json={"error": "boom"})
        page, limit = int(params["page"]), int(params["limit"])
        if page in self.slow_pages:
            await asyncio.sleep(0.1)
        term = params.get("search", "").lower()
        titles = [t for t in TITLES if term in t.lower()]
        if params.get("sortOrder") == "desc":
            titles.reverse()
        chunk = titles[(page - 1) * limit: page * limit]
        total_pages = -(-len(titles) // limit)
        return httpx.Response(200, json={"movies": [{"title": t, "year": 2000} for t in chunk],
                                         "totalPages": total_pages})


def _browser(api, **kwargs):
    client = CatalogClient("http://catalog.test", transport=httpx.MockTransport(api))
    return CatalogBrowser(client, debounce=0.02, **kwargs)


def test_initial_load_and_paging_boundaries():
    async def scenario():
        api = FakeApi()
        b = _browser(api)
        assert b.status is Status.IDLE

        await b.load()
        assert b.status is Status.SUCCESS
        assert b.total_pages == 3
        assert not b.can_go_back and b.can_go_forward

        await b.prev()
        await b.first()
        assert len(api.requests) == 1

        await b.next()
        assert b.page == 2
        await b.last()
        assert b.page == 3
        assert [m["title"] for m in b.movies] == ["Movie 20", "Movie 21", "Movie 22", "Movie 23", "Movie 24"]
        assert not b.can_go_forward

        await b.next()
        assert len(api.requests) == 3
        await b.first()
        assert b.page == 1
        await b.client.aclose()

    asyncio.run(scenario())


def test_sort_change_resets_page():
    async def scenario():
        api = FakeApi()
        b = _browser(api)
        await b.load()
        await b.next()
        await b.set_sort("year")
        assert b.page == 1
        assert api.requests[-1]["sortBy"] == "year"
        assert api.requests[-1]["sortOrder"] == "desc"
        assert b.movies[0]["title"] == "Movie 24"
        with pytest.raises(ValueError):
            await b.set_sort("rating")
        await b.client.aclose()

    asyncio.run(scenario())


def test_search_is_debounced_and_resets_page():
    async def scenario():
        api = FakeApi()
        b = _browser(api)
        await b.load()
        await b.next()

        b.set_search("m")
        b.set_search("mov")
        task = b.set_search("movie 1")
        await task

        searches = [r.get("search") for r in api.requests]
        assert searches == ["", "", "movie 1"]
        assert b.page == 1
        assert b.applied_search == "movie 1"
        assert len(b.movies) == 10
        await b.client.aclose()

    asyncio.run(scenario())


def test_failure_clears_list_and_shows_generic_message():
    async def scenario():
        api = FakeApi()
        b = _browser(api)
        await b.load()
        assert b.movies

        api.fail = True
        await b.next()
        assert b.status is Status.ERROR
        assert b.movies == []
        assert b.error == LOAD_ERROR
        assert b.render() == [LOAD_ERROR]
        # no retry
        assert len(api.requests) == 2
        await b.client.aclose()

    asyncio.run(scenario())


def test_stale_response_is_dropped():
    async def scenario():
        api = FakeApi(slow_pages={1})
        b = _browser(api)
        b.total_pages = 3

        slow = asyncio.ensure_future(b.load())
        await asyncio.sleep(0.01)
        b.page = 2
        await b.load()
        await slow

        assert b.status is Status.SUCCESS
        assert b.movies[0]["title"] == "Movie 10"
        await b.client.aclose()

    asyncio.run(scenario())


def test_render():
    async def scenario():
        b = _browser(FakeApi())
        await b.load()
        lines = b.render()
        assert lines[0] == "Movie 00 (2000)"
        assert lines[-1] == "Page 1 of 3"
        await b.client.aclose()

    asyncio.run(scenario())


def test_non_json_success_body_is_a_load_error():
    async def scenario():
        def handler(request):
            return httpx.Response(200, text="<html>maintenance</html>")

        b = CatalogBrowser(CatalogClient("http://catalog.test", transport=httpx.MockTransport(handler)))
        await b.load()
        assert b.status is Status.ERROR
        assert b.error == LOAD_ERROR
        assert b.movies == []
        await b.client.aclose()

    asyncio.run(scenario())
