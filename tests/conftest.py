#!/usr/bin/env python3
"""
Shared fixtures: in-memory TMDb client and feed builders
"""

import sys
import threading
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from awards.feed import parse_records
from awards.tmdb import empty_search_result


class FakeTMDbClient:
    """Records every call; answers from dicts instead of HTTP"""

    def __init__(self, details=None, searches=None, fail_ids=(), raise_ids=()):
        self.details = details or {}
        self.searches = searches or {}
        self.fail_ids = set(fail_ids)
        self.raise_ids = set(raise_ids)
        self.details_requests = []
        self.search_requests = []
        self._lock = threading.Lock()

    def get_movie_details(self, tmdb_id):
        with self._lock:
            self.details_requests.append(tmdb_id)
        if tmdb_id in self.raise_ids:
            raise RuntimeError(f"connection reset for {tmdb_id}")
        if tmdb_id in self.fail_ids:
            return None
        return self.details.get(tmdb_id)

    def search(self, query):
        with self._lock:
            self.search_requests.append(query)
        results = empty_search_result()
        results['movies'] = list(self.searches.get(query, []))
        return results


@pytest.fixture
def fake_tmdb():
    return FakeTMDbClient


@pytest.fixture
def make_records():
    """Build NominationRecords from feed-shaped dicts"""
    def _make(*entries):
        return parse_records(list(entries))
    return _make
