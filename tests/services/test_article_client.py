"""Tests for JsonPlaceholderClient using httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from taskdesk_cli.exceptions import FetchFailure
from taskdesk_cli.services.articles import ArticleSourceProtocol, JsonPlaceholderClient

ENDPOINT = "https://example.test/posts"

POSTS = [
    {"userId": 1, "id": 1, "title": "sunt aut facere", "body": "quia et suscipit"},
    {"userId": 2, "id": 2, "title": "qui est esse", "body": "est rerum tempore " * 300},
]


def _client(handler) -> JsonPlaceholderClient:
    return JsonPlaceholderClient(ENDPOINT, timeout=5, transport=httpx.MockTransport(handler))


def test_satisfies_protocol():
    assert isinstance(JsonPlaceholderClient(), ArticleSourceProtocol)


@pytest.mark.asyncio
async def test_fetch_all_enriches_articles():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=POSTS)

    articles = await _client(handler).fetch_all()

    assert len(requests) == 1
    assert str(requests[0].url) == ENDPOINT
    assert [a.id for a in articles] == [1, 2]
    first, second = articles
    assert first.author == "User 1"
    assert first.category == "Technology"
    assert first.read_time == 1
    assert second.category == "Science"
    assert second.read_time == 5  # 900 words


@pytest.mark.asyncio
async def test_non_success_status_raises():
    client = _client(lambda request: httpx.Response(503))
    with pytest.raises(FetchFailure) as excinfo:
        await client.fetch_all()
    assert excinfo.value.message == "HTTP error! status: 503"


@pytest.mark.asyncio
async def test_network_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchFailure, match="connection refused"):
        await _client(handler).fetch_all()


@pytest.mark.asyncio
async def test_invalid_json_raises():
    client = _client(lambda request: httpx.Response(200, content=b"<html>"))
    with pytest.raises(FetchFailure, match="Invalid JSON"):
        await client.fetch_all()


@pytest.mark.asyncio
async def test_non_list_payload_raises():
    client = _client(lambda request: httpx.Response(200, json={"posts": POSTS}))
    with pytest.raises(FetchFailure):
        await client.fetch_all()


@pytest.mark.asyncio
async def test_malformed_records_are_skipped():
    payload = [POSTS[0], "junk", {"id": "not-a-number", "title": "x", "body": "y"}, {"id": 3}]
    articles = await _client(lambda request: httpx.Response(200, json=payload)).fetch_all()
    assert [a.id for a in articles] == [1]


@pytest.mark.asyncio
async def test_empty_list_is_success():
    articles = await _client(lambda request: httpx.Response(200, json=[])).fetch_all()
    assert articles == []


@pytest.mark.asyncio
async def test_zero_read_time_is_estimated_not_dropped():
    payload = [
        {"userId": 1, "id": 1, "title": "a", "body": "short body", "readTime": 0},
        POSTS[1],
    ]
    articles = await _client(lambda request: httpx.Response(200, json=payload)).fetch_all()
    assert [a.id for a in articles] == [1, 2]
    assert articles[0].read_time == 1
