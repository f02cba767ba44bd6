"""Pytest fixtures: a recording session that serves canned responses."""

import pytest

from tests.helpers import BASE_URL, FakeSession, make_response
from yts_catalog.providers.yts_client import YTSClient
from yts_catalog.utils.config import CatalogConfig


@pytest.fixture
def two_movies():
    return [
        {
            "id": 10,
            "url": "https://yts.test/movies/alpha-2001",
            "imdb_code": "tt0000010",
            "title": "Alpha",
            "title_english": "Alpha",
            "title_long": "Alpha (2001)",
            "year": 2001,
            "rating": 7.4,
            "runtime": 101,
            "genres": ["Drama", "Action"],
            "language": "en",
            "state": "ok",
            "small_cover_image": "https://img.yts.test/alpha/small.jpg",
            "medium_cover_image": "https://img.yts.test/alpha/medium.jpg",
            "torrents": [],
            "date_uploaded": "2020-01-02 03:04:05",
            "date_uploaded_unix": 1577934245,
        },
        {
            "id": 11,
            "imdb_code": "tt0000011",
            "title": "Beta",
            "title_long": "Beta (1999)",
            "year": 1999,
            "rating": 8,
            "runtime": 95,
            "genres": ["Comedy"],
            "language": "fr",
            "state": "ok",
            "small_cover_image": "https://img.yts.test/beta/small.jpg",
            "medium_cover_image": "https://img.yts.test/beta/medium.jpg",
            "torrents": [
                {
                    "url": "https://yts.test/torrent/download/AAAA",
                    "hash": "AAAA",
                    "quality": "720p",
                    "type": "bluray",
                    "seeds": 12,
                    "peers": 3,
                    "size": "800.5 MB",
                    "size_bytes": 839385088,
                    "date_uploaded": "2021-05-06 07:08:09",
                    "date_uploaded_unix": 1620284889,
                },
                {
                    "url": "https://yts.test/torrent/download/BBBB",
                    "hash": "BBBB",
                    "quality": "1080p",
                    "seeds": 40,
                    "peers": 9,
                    "size": "1.6 GB",
                    "size_bytes": 1717986918,
                    "date_uploaded": "2021-05-06 08:00:00",
                    "date_uploaded_unix": 1620288000,
                },
            ],
            "date_uploaded": "2021-05-06 07:08:09",
            "date_uploaded_unix": 1620284889,
        },
    ]


@pytest.fixture
def config():
    return CatalogConfig(base_url=BASE_URL)


@pytest.fixture
def make_client(config):
    def _make(body=None, status_code=200, error=None):
        response = None if error is not None else make_response(body, status_code)
        session = FakeSession(response=response, error=error)
        return YTSClient(config, session=session), session
    return _make
