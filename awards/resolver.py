#!/usr/bin/env python3
"""
Resolve one film reference to a TMDb movie record

Resolution order:
1. TMDb id present → movie details by id. The id is authoritative: a failed
   lookup is final and never falls back to title search, which could
   substitute an unrelated film.
2. No id → title search; exact case-insensitive title match, else first
   movie result, else unresolved.

Unresolved is None. No caching here; deduplication happens per batch in
awards.coordinator.
"""

import asyncio
import logging
from typing import Dict, List, Optional

from awards.constants import MEDIA_TYPE_MOVIE
from awards.models import MovieRef
from awards.tmdb import genre_ids_from_details

logger = logging.getLogger(__name__)


def normalize_title(title: str) -> str:
    return ' '.join((title or '').split()).lower()


def choose_search_result(candidates: List[Dict], title: str) -> Optional[Dict]:
    """Exact case-insensitive title match wins over relevance order"""
    if not candidates:
        return None

    wanted = normalize_title(title)
    for candidate in candidates:
        if normalize_title(candidate.get('title', '')) == wanted:
            return candidate

    return candidates[0]


def as_movie(record: Dict) -> Dict:
    """Copy of a TMDb payload tagged as a movie, with genre_ids filled in"""
    media = dict(record)
    media['media_type'] = MEDIA_TYPE_MOVIE
    media['genre_ids'] = genre_ids_from_details(record)
    return media


class IdentityResolver:
    """Resolve MovieRefs through a TMDbClient without blocking the event loop"""

    def __init__(self, tmdb_client, semaphore: Optional[asyncio.Semaphore] = None):
        self.tmdb = tmdb_client
        self.semaphore = semaphore

    async def _call(self, func, *args):
        if self.semaphore is None:
            return await asyncio.to_thread(func, *args)
        async with self.semaphore:
            return await asyncio.to_thread(func, *args)

    async def resolve(self, ref: MovieRef) -> Optional[Dict]:
        """
        Resolve a reference to a TMDb movie dict

        Returns None when the reference cannot be resolved; never raises
        for lookup failures.
        """
        try:
            if ref.tmdb_id:
                return await self._resolve_by_id(ref)
            return await self._resolve_by_title(ref)
        except Exception as e:
            logger.warning(f"Resolution failed for '{ref.title}' ({ref.key}): {e}")
            return None

    async def _resolve_by_id(self, ref: MovieRef) -> Optional[Dict]:
        details = await self._call(self.tmdb.get_movie_details, ref.tmdb_id)
        if not details:
            logger.debug(f"Unresolved: '{ref.title}' (tmdb {ref.tmdb_id} not available)")
            return None
        return as_movie(details)

    async def _resolve_by_title(self, ref: MovieRef) -> Optional[Dict]:
        results = await self._call(self.tmdb.search, ref.title)
        movies = (results or {}).get('movies') or []
        chosen = choose_search_result(movies, ref.title)
        if chosen is None:
            logger.debug(f"Unresolved: no TMDb movie results for '{ref.title}'")
            return None

        if normalize_title(chosen.get('title', '')) != normalize_title(ref.title):
            logger.debug(f"No exact title match for '{ref.title}', using '{chosen.get('title')}'")

        return as_movie(chosen)
