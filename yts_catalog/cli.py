"""
Command-line access to the movie catalog:
- list: one page of movies with sort/filter options
- search: movies matching a title
- status: check that the service answers
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from yts_catalog.domain.models import CatalogMirror, Movie, OrderDirection, SortField
from yts_catalog.providers.yts_client import YTSClient
from yts_catalog.utils.config import CatalogConfig
from yts_catalog.utils.error_handlings import CatalogError, CatalogUnavailableError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not 0 < number < float("inf"):
        raise argparse.ArgumentTypeError(f"must be a positive number of seconds, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yts-catalog", description="Browse the YTS movie catalog")
    parser.add_argument("--mirror", choices=[m.value["host"] for m in CatalogMirror],
                        help="Catalog mirror to query (default: YTS_MIRROR or yts.mx)")
    parser.add_argument("--base-url", help="API base URL, overrides --mirror")
    parser.add_argument("--timeout", type=positive_float, help="Request timeout in seconds")
    parser.add_argument("--magnets", action="store_true", help="Print a magnet link for every torrent")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List one page of movies")
    list_cmd.add_argument("--page", type=int, default=1)
    list_cmd.add_argument("--min-rating", type=int, default=0)
    list_cmd.add_argument("--sort-by", choices=[f.value for f in SortField], default=SortField.DATE_ADDED.value)
    list_cmd.add_argument("--order-by", choices=[o.value for o in OrderDirection], default=OrderDirection.DESC.value)

    search_cmd = sub.add_parser("search", help="Search movies by title")
    search_cmd.add_argument("query")

    sub.add_parser("status", help="Check that the catalog service answers")
    return parser


def build_config(args: argparse.Namespace) -> CatalogConfig:
    """Environment first, then command-line overrides"""
    config = CatalogConfig.from_env()
    overrides = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    elif args.mirror:
        overrides["base_url"] = CatalogMirror.from_host(args.mirror).api_url
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    return replace(config, **overrides)


def print_movies(movies: List[Movie], magnets: bool = False) -> None:
    if not movies:
        print("No movies found")
        return
    for movie in movies:
        genres = ", ".join(movie.genres) or "-"
        print(f"{movie.title_long or movie.title}  [{movie.rating:.1f}] {genres}  imdb:{movie.imdb_code or '-'}")
        for torrent in movie.torrents:
            print(f"    {torrent.quality:<6} {torrent.size:>10}  seeds:{torrent.seeds} peers:{torrent.peers}  {torrent.url}")
            if magnets and torrent.hash:
                print(f"           {torrent.magnet_uri(movie.title_long or movie.title)}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    with YTSClient(config) as client:
        try:
            if args.command == "list":
                print_movies(client.list_movies(args.page, args.min_rating, args.sort_by, args.order_by), args.magnets)
            elif args.command == "search":
                print_movies(client.search_movies(args.query), args.magnets)
            else:
                try:
                    client.check_status()
                except CatalogUnavailableError as e:
                    print(f"{config.base_url} is unavailable: {e}")
                    return 1
                print(f"{config.base_url} is up")
        except CatalogError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
