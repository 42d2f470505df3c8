#!/usr/bin/env python3
"""
oscar.py - Oscar nominations by year, resolved against TMDb

Read-only: fetches the nomination feed, resolves each unique film once,
prints a per-category report and optionally writes the view as JSON.

Pipeline:
1. Fetch nomination feed (once)
2. Select effective year (falls back one year when the requested year has no records)
3. Group nominations into categories (sorted, deduplicated)
4. Resolve unique films concurrently → TMDb id lookup, else title search
5. Assemble per-category items + winner annotations
"""

import sys
import json
import asyncio
import logging
import argparse
from pathlib import Path
from typing import Optional

import yaml

from awards.constants import (
    OSCAR_FEED_URL, TMDB_DEFAULT_LANGUAGE, MIN_YEAR,
    MAX_CONCURRENT_LOOKUPS, REQUEST_TIMEOUT,
)
from awards.coordinator import BatchResolutionCoordinator
from awards.feed import NominationFeedClient
from awards.models import AwardsView
from awards.resolver import IdentityResolver
from awards.session import AwardsSession
from awards.tmdb import TMDbClient, get_genre_name

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file"""
    with open(config_path, 'r') as f:
        return yaml.safe_load(f) or {}


class OscarBrowser:
    """Wire feed, TMDb client and session together from config"""

    def __init__(self, config: dict, no_api: bool = False, current_year: Optional[int] = None):
        self.config = config
        self.no_api = no_api
        self.tmdb: Optional[TMDbClient] = None
        self.resolver: Optional[IdentityResolver] = None
        self.max_concurrent_lookups = self._lookup_limit()
        self._setup_components(current_year)

    def _lookup_limit(self) -> int:
        """Concurrent TMDb lookups allowed; invalid settings fall back to the default"""
        limit = self.config.get('max_concurrent_lookups')
        if isinstance(limit, int) and not isinstance(limit, bool) and limit > 0:
            return limit
        if limit is not None:
            logger.warning(f"Invalid max_concurrent_lookups {limit!r}, using {MAX_CONCURRENT_LOOKUPS}")
        return MAX_CONCURRENT_LOOKUPS

    def _setup_components(self, current_year: Optional[int]):
        timeout = self.config.get('request_timeout', REQUEST_TIMEOUT)

        self.feed = NominationFeedClient(
            url=self.config.get('feed_url') or OSCAR_FEED_URL,
            timeout=timeout
        )

        coordinator = None
        tmdb_key = self.config.get('tmdb_api_key')
        if tmdb_key and not self.no_api:
            self.tmdb = TMDbClient(
                api_key=tmdb_key,
                language=self.config.get('tmdb_language') or TMDB_DEFAULT_LANGUAGE,
                timeout=timeout
            )
            self.resolver = IdentityResolver(self.tmdb)
            coordinator = BatchResolutionCoordinator(self.resolver)
            logger.info("TMDb resolution enabled")
        elif self.no_api:
            logger.info("TMDb resolution disabled (--no-api): categories only")
        else:
            logger.warning("TMDb resolution disabled (no API key in config)")

        self.session = AwardsSession(
            self.feed,
            coordinator=coordinator,
            current_year=current_year,
            min_year=self.config.get('min_year', MIN_YEAR)
        )

    async def run(self, year: int) -> Optional[AwardsView]:
        # Semaphores bind to the running loop
        if self.resolver is not None:
            self.resolver.semaphore = asyncio.Semaphore(self.max_concurrent_lookups)
        if not await self.session.load():
            return None
        return await self.session.select_year(year)

    def print_report(self, view: AwardsView):
        """Print the per-category report"""
        print("\n" + "=" * 60)
        header = f"OSCAR {view.effective_year}"
        if view.effective_year != view.requested_year:
            header += f" (requested {view.requested_year})"
        print(f"{header} - {view.mode_label}")
        print("=" * 60)

        if not view.categories:
            print("No Oscar data available for this year.")

        for category in view.categories:
            print(f"\n{category.name}")
            if category.winner_titles:
                print(f"  Winner: {', '.join(category.winner_titles)}")
            if not category.has_items:
                print("  No titles available for this category.")
                continue
            for item in category.items:
                release = (item.get('release_date') or '')[:4]
                suffix = f" ({release})" if release else ""
                genres = [name for name in map(get_genre_name, item.get('genre_ids') or []) if name]
                if genres:
                    suffix += f" - {', '.join(genres)}"
                print(f"  - {item.get('title')}{suffix} [tmdb {item.get('id')}]")

            nominated = len(self.session.categories[category.name].nominee_refs())
            unresolved = nominated - len(category.items)
            if unresolved:
                print(f"  ({unresolved} unresolved)")

        if self.tmdb:
            stats = self.tmdb.get_request_stats()
            print(f"\nTMDb requests: {stats['total_requests']} "
                  f"({stats['details_calls']} by id, {stats['search_calls']} searches, "
                  f"{stats['failures']} failed)")

        print("=" * 60)


def write_view(view: AwardsView, output_path: Path):
    """Write the view as JSON"""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(view.to_dict(), f, indent=2, ensure_ascii=False)
    logger.info(f"View written to {output_path}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Oscar nominees and winners by year, resolved against TMDb',
        epilog="""
Examples:
  python oscar.py
  python oscar.py 2024
  python oscar.py 1998 --output output/oscar_1998.json
  python oscar.py 2024 --no-api
        """
    )
    parser.add_argument('year', type=int, nargs='?', default=None,
                        help='Ceremony year (default: current year)')
    parser.add_argument('--config', type=Path, default=Path('config.yaml'),
                        help='Configuration file (default: config.yaml)')
    parser.add_argument('--output', '-o', type=Path, default=None,
                        help='Write the assembled view as JSON')
    parser.add_argument('--no-api', action='store_true', dest='no_api',
                        help='Skip TMDb resolution (categories and winners only)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Debug logging')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.config.exists():
        logger.error(f"Config file not found: {args.config}")
        return 1

    browser = OscarBrowser(load_config(args.config), no_api=args.no_api)
    year = args.year or browser.session.current_year

    try:
        view = asyncio.run(browser.run(year))
    except ValueError as e:
        logger.error(str(e))
        return 1

    if browser.session.error:
        logger.error(browser.session.error)
        return 1

    browser.print_report(view)

    if args.output:
        write_view(view, args.output)

    return 0


if __name__ == '__main__':
    sys.exit(main())
