#!/usr/bin/env python3
"""
Nomination feed client

The feed is a static JSON array of objects shaped like:
    {"category": "Best Picture", "year": "2023", "nominees": [...],
     "movies": [{"title": "Oppenheimer", "tmdb_id": 872585, "imdb_id": "tt15398776"}],
     "won": true}

It is fetched once per session and treated as read-only afterwards.
"""

import asyncio
import logging
from typing import Any, List

import requests

from awards.constants import OSCAR_FEED_URL, REQUEST_TIMEOUT
from awards.models import NominationRecord

logger = logging.getLogger(__name__)


class FeedFetchError(Exception):
    """Feed unreachable, non-2xx, or not decodable as JSON"""


def parse_records(data: Any) -> List[NominationRecord]:
    """
    Build NominationRecords from a decoded feed document

    A document that is not a JSON array yields no records.
    Entries that are not objects are skipped.
    """
    if not isinstance(data, list):
        logger.warning(f"Nomination feed is a {type(data).__name__}, expected a list, no records loaded")
        return []

    records = [NominationRecord.from_dict(item) for item in data if isinstance(item, dict)]

    skipped = len(data) - len(records)
    if skipped:
        logger.debug(f"Skipped {skipped} malformed feed entries")

    return records


class NominationFeedClient:
    """Fetch and decode the nomination feed"""

    def __init__(self, url: str = OSCAR_FEED_URL, timeout: int = REQUEST_TIMEOUT):
        self.url = url
        self.timeout = timeout

    def fetch(self) -> List[NominationRecord]:
        """
        GET the feed document

        Raises:
            FeedFetchError: on transport errors, non-2xx status or malformed JSON
        """
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise FeedFetchError(f"Nomination feed timed out: {self.url}") from e
        except requests.exceptions.HTTPError as e:
            raise FeedFetchError(f"Nomination feed request failed: {e}") from e
        except requests.exceptions.RequestException as e:
            raise FeedFetchError(f"Nomination feed unreachable: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise FeedFetchError(f"Nomination feed is not valid JSON: {e}") from e

        records = parse_records(data)
        logger.info(f"Loaded {len(records)} nomination records from feed")
        return records

    async def fetch_async(self) -> List[NominationRecord]:
        """fetch() in a worker thread so the event loop keeps running"""
        return await asyncio.to_thread(self.fetch)
