#!/usr/bin/env python3
"""
TMDb API client for movie details and title search
"""

import logging
import threading
from typing import Optional, Dict, List

import requests

from awards.constants import (
    TMDB_BASE_URL, TMDB_DEFAULT_LANGUAGE, TMDB_GENRES,
    REQUEST_TIMEOUT, SEARCH_PARTITIONS,
)

logger = logging.getLogger(__name__)


def get_genre_name(genre_id: int) -> Optional[str]:
    """Map TMDb genre ID to name"""
    return TMDB_GENRES.get(genre_id)


def genre_ids_from_details(details: Dict) -> List[int]:
    """
    Genre ids for a TMDb payload

    Search results carry 'genre_ids'; detail payloads only embed 'genres'
    as [{'id': 18, 'name': 'Drama'}, ...].
    """
    if details.get('genre_ids'):
        return list(details['genre_ids'])
    return [
        genre['id'] for genre in details.get('genres') or []
        if isinstance(genre, dict) and genre.get('id') is not None
    ]


def empty_search_result() -> Dict[str, List[Dict]]:
    return {partition: [] for partition in SEARCH_PARTITIONS.values()}


class TMDbClient:
    """Interface to The Movie Database API"""

    def __init__(self, api_key: str, language: str = TMDB_DEFAULT_LANGUAGE,
                 timeout: int = REQUEST_TIMEOUT):
        self.api_key = api_key
        self.base_url = TMDB_BASE_URL
        self.language = language
        self.timeout = timeout
        self.details_calls = 0
        self.search_calls = 0
        self.failures = 0
        # Lookups run in worker threads
        self._stats_lock = threading.Lock()

    def _count(self, counter: str):
        with self._stats_lock:
            setattr(self, counter, getattr(self, counter) + 1)

    def _get(self, path: str, **params) -> Dict:
        """GET a TMDb endpoint and decode the JSON body (raises on HTTP errors)"""
        params['api_key'] = self.api_key
        params.setdefault('language', self.language)
        response = requests.get(
            f"{self.base_url}{path}",
            params=params,
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    def get_movie_details(self, tmdb_id: int) -> Optional[Dict]:
        """
        Fetch a movie by TMDb id

        Returns the detail payload, or None when not found or the request fails
        """
        self._count('details_calls')
        try:
            data = self._get(f"/movie/{tmdb_id}")
        except requests.exceptions.Timeout:
            self._count('failures')
            logger.warning(f"TMDb API timeout for movie {tmdb_id}")
            return None
        except requests.exceptions.HTTPError as e:
            self._count('failures')
            status = e.response.status_code if e.response is not None else None
            if status == 404:
                logger.debug(f"TMDb movie {tmdb_id} not found")
            else:
                logger.warning(f"TMDb API HTTP error for movie {tmdb_id}: {e}")
            return None
        except (requests.exceptions.RequestException, ValueError) as e:
            self._count('failures')
            logger.warning(f"TMDb API error for movie {tmdb_id}: {e}")
            return None

        if not isinstance(data, dict) or data.get('id') is None:
            self._count('failures')
            logger.warning(f"TMDb returned an unexpected payload for movie {tmdb_id}")
            return None

        return data

    def search(self, query: str) -> Dict[str, List[Dict]]:
        """
        Multi-search by free text

        Returns dict with keys: movies, tv, people (each a list of result dicts,
        in TMDb relevance order). Failures return empty lists.
        """
        self._count('search_calls')
        results = empty_search_result()
        try:
            data = self._get('/search/multi', query=query, include_adult=False)
        except requests.exceptions.Timeout:
            self._count('failures')
            logger.warning(f"TMDb API timeout searching '{query}'")
            return results
        except requests.exceptions.HTTPError as e:
            self._count('failures')
            logger.warning(f"TMDb API HTTP error searching '{query}': {e}")
            return results
        except (requests.exceptions.RequestException, ValueError) as e:
            self._count('failures')
            logger.warning(f"TMDb API error searching '{query}': {e}")
            return results

        if not isinstance(data, dict):
            self._count('failures')
            logger.warning(f"TMDb returned an unexpected payload searching '{query}'")
            return results

        for item in data.get('results') or []:
            if not isinstance(item, dict):
                continue
            partition = SEARCH_PARTITIONS.get(item.get('media_type'))
            if partition:
                results[partition].append(item)

        if not results['movies']:
            logger.debug(f"No TMDb movie results for '{query}'")

        return results

    def get_request_stats(self) -> Dict:
        """Get API request statistics"""
        return {
            'details_calls': self.details_calls,
            'search_calls': self.search_calls,
            'total_requests': self.details_calls + self.search_calls,
            'failures': self.failures,
        }
