from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Tuple
from urllib.parse import urlencode

from yts_catalog.utils.error_handlings import CatalogDecodeError

# Trackers listed by the YTS API documentation for building magnet links
DEFAULT_TRACKERS = (
    "udp://open.demonii.com:1337/announce",
    "udp://tracker.openbittorrent.com:80",
    "udp://tracker.coppersurfer.tk:6969",
    "udp://glotorrents.pw:6969/announce",
    "udp://tracker.opentrackr.org:1337/announce",
    "udp://torrent.gresille.org:80/announce",
    "udp://p4p.arenabg.com:1337",
    "udp://tracker.leechers-paradise.org:6969",
)


def _expect_object(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise CatalogDecodeError(f"{what} should be a JSON object, got {type(value).__name__}")
    return value


def _get_str(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise CatalogDecodeError(f"Field '{key}' should be a string, got {type(value).__name__}")
    return value


def _get_int(data: dict, key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass but never a valid JSON number
    if isinstance(value, bool):
        raise CatalogDecodeError(f"Field '{key}' should be an integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise CatalogDecodeError(f"Field '{key}' should be an integer, got {value!r}")


def _get_float(data: dict, key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogDecodeError(f"Field '{key}' should be a number, got {value!r}")
    try:
        return float(value)
    except OverflowError as e:
        raise CatalogDecodeError(f"Field '{key}' is out of range for a float") from e


def _get_list(data: dict, key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise CatalogDecodeError(f"Field '{key}' should be a JSON array, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Torrent:
    quality: str
    size: str
    size_bytes: int
    seeds: int
    peers: int
    hash: str
    url: str
    date_uploaded: str
    date_uploaded_unix: int

    @classmethod
    def from_dict(cls, data: Any) -> 'Torrent':
        """Decodes one torrent object of a movie's ``torrents`` array"""
        data = _expect_object(data, "Torrent")
        return cls(
            quality=_get_str(data, 'quality'),
            size=_get_str(data, 'size'),
            size_bytes=_get_int(data, 'size_bytes'),
            seeds=_get_int(data, 'seeds'),
            peers=_get_int(data, 'peers'),
            hash=_get_str(data, 'hash'),
            url=_get_str(data, 'url'),
            date_uploaded=_get_str(data, 'date_uploaded'),
            date_uploaded_unix=_get_int(data, 'date_uploaded_unix'),
        )

    def magnet_uri(self, display_name: str, trackers: Iterable[str] = DEFAULT_TRACKERS) -> str:
        """
        Build a magnet link for this torrent.

        Args:
            display_name: Name shown by the torrent client (``dn``)
            trackers: Announce URLs added as ``tr`` parameters

        Returns:
            str: ``magnet:?xt=urn:btih:<hash>&dn=...&tr=...``
        """
        if not self.hash:
            raise ValueError("Torrent has no info hash")
        params = [('dn', display_name)] + [('tr', tracker) for tracker in trackers]
        return f"magnet:?xt=urn:btih:{self.hash}&{urlencode(params)}"


@dataclass(frozen=True)
class Movie:
    id: int
    imdb_code: str
    title: str
    title_long: str
    year: int
    rating: float
    runtime: int
    genres: Tuple[str, ...]
    language: str
    state: str
    small_cover_image: str
    medium_cover_image: str
    date_uploaded: str
    date_uploaded_unix: int
    torrents: Tuple[Torrent, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Any) -> 'Movie':
        """Decodes one entry of ``data.movies``; unknown keys are ignored"""
        data = _expect_object(data, "Movie")
        genres = _get_list(data, 'genres')
        for genre in genres:
            if not isinstance(genre, str):
                raise CatalogDecodeError(f"Genre should be a string, got {genre!r}")

        return cls(
            id=_get_int(data, 'id'),
            imdb_code=_get_str(data, 'imdb_code'),
            title=_get_str(data, 'title'),
            title_long=_get_str(data, 'title_long'),
            year=_get_int(data, 'year'),
            rating=_get_float(data, 'rating'),
            runtime=_get_int(data, 'runtime'),
            genres=tuple(genres),
            language=_get_str(data, 'language'),
            state=_get_str(data, 'state'),
            small_cover_image=_get_str(data, 'small_cover_image'),
            medium_cover_image=_get_str(data, 'medium_cover_image'),
            date_uploaded=_get_str(data, 'date_uploaded'),
            date_uploaded_unix=_get_int(data, 'date_uploaded_unix'),
            torrents=tuple(Torrent.from_dict(t) for t in _get_list(data, 'torrents')),
        )

    def magnet_uris(self, trackers: Iterable[str] = DEFAULT_TRACKERS) -> List[str]:
        """Returns one magnet link per torrent, in torrent order"""
        name = self.title_long or self.title
        trackers = tuple(trackers)
        return [torrent.magnet_uri(name, trackers) for torrent in self.torrents]


@dataclass(frozen=True)
class ListData:
    page_number: int
    movies: Tuple[Movie, ...]

    @classmethod
    def from_dict(cls, data: Any) -> 'ListData':
        data = _expect_object(data, "Envelope 'data'")
        # YTS leaves out the movies key entirely when nothing matched
        return cls(
            page_number=_get_int(data, 'page_number'),
            movies=tuple(Movie.from_dict(m) for m in _get_list(data, 'movies')),
        )


@dataclass(frozen=True)
class ResponseEnvelope:
    status: str
    status_message: str
    data: ListData

    @classmethod
    def from_dict(cls, payload: Any) -> 'ResponseEnvelope':
        payload = _expect_object(payload, "Response body")
        data = payload.get('data')
        return cls(
            status=_get_str(payload, 'status'),
            status_message=_get_str(payload, 'status_message'),
            data=ListData(page_number=0, movies=()) if data is None else ListData.from_dict(data),
        )


class SortField(Enum):
    TITLE = "title"
    YEAR = "year"
    RATING = "rating"
    PEERS = "peers"
    SEEDS = "seeds"
    DOWNLOAD_COUNT = "download_count"
    LIKE_COUNT = "like_count"
    DATE_ADDED = "date_added"


class OrderDirection(Enum):
    ASC = "asc"
    DESC = "desc"


class CatalogMirror(Enum):
    YTS_AG = {
        "name": "YTS.ag",
        "host": "yts.ag",
        "api_url": "https://yts.ag/api/v2",
    }
    YTS_AM = {
        "name": "YTS.am",
        "host": "yts.am",
        "api_url": "https://yts.am/api/v2",
    }
    YTS_LT = {
        "name": "YTS.lt",
        "host": "yts.lt",
        "api_url": "https://yts.lt/api/v2",
    }
    YTS_MX = {
        "name": "YTS.mx",
        "host": "yts.mx",
        "api_url": "https://yts.mx/api/v2",
    }

    @property
    def config(self) -> dict:
        """Returns the configuration dictionary for the mirror"""
        return self.value

    @property
    def api_url(self) -> str:
        return self.value["api_url"]

    @classmethod
    def from_host(cls, host: str) -> 'CatalogMirror':
        """Returns the mirror serving the given hostname, e.g. ``yts.mx``"""
        wanted = host.strip().lower()
        for mirror in cls:
            if mirror.value["host"] == wanted:
                return mirror
        raise ValueError(f"No CatalogMirror found for host: {host}")
