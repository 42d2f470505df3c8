#!/usr/bin/env python3
"""
Per-session state for browsing Oscar nominations by year

Holds the feed (fetched once, read-only afterwards), the selected year and
the last committed view. Selecting a year re-runs
year selection → grouping → batch resolution → view assembly.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from awards.constants import FEED_ERROR_MESSAGE, MIN_YEAR
from awards.feed import FeedFetchError
from awards.grouping import group_by_category
from awards.models import AwardsView, Category, NominationRecord
from awards.view import build_view
from awards.years import available_years, select_effective_year

logger = logging.getLogger(__name__)


class AwardsSession:
    """Feed + year selection + committed view for one browsing session"""

    def __init__(self, feed_client, coordinator=None, current_year: Optional[int] = None,
                 min_year: int = MIN_YEAR):
        self.feed = feed_client
        self.coordinator = coordinator  # None → no resolution (offline)
        self.current_year = current_year or datetime.now().year
        self.min_year = min_year

        self.records: List[NominationRecord] = []
        self.selected_year = self.current_year
        self.effective_year: Optional[int] = None
        self.categories: Dict[str, Category] = {}
        self.view: Optional[AwardsView] = None
        self.is_loading = False
        self.error: Optional[str] = None

    @property
    def available_years(self) -> List[int]:
        return available_years(self.current_year, self.min_year)

    def _clear_derived(self):
        """Drop everything computed from the previous feed"""
        if self.coordinator is not None:
            self.coordinator.reset()
        self.effective_year = None
        self.categories = {}
        self.view = None

    async def load(self) -> bool:
        """
        Fetch the nomination feed

        Returns True on success. On failure the error message is set and
        previously loaded data is cleared; nothing is raised. Either way a
        selection still resolving against the previous feed is superseded,
        and the year has to be selected again.
        """
        self.is_loading = True
        self.error = None
        try:
            self.records = await self.feed.fetch_async()
            return True
        except FeedFetchError as e:
            logger.error(f"Could not load nomination feed: {e}")
            self.records = []
            self.error = FEED_ERROR_MESSAGE
            return False
        finally:
            self._clear_derived()
            self.is_loading = False

    async def select_year(self, year: int) -> Optional[AwardsView]:
        """
        Recompute categories and resolved items for a year

        Returns the committed view, or None when a later selection superseded
        this one before its lookups settled.

        Raises:
            ValueError: year outside the selectable range
            Anything the coordinator raises before lookups start, after
            setting the error message
        """
        if year not in self.available_years:
            raise ValueError(f"Year {year} outside {self.min_year}-{self.current_year}")

        self.selected_year = year
        effective_year = select_effective_year(self.records, year)
        categories = group_by_category(self.records, effective_year)
        self.effective_year = effective_year
        self.categories = categories

        if effective_year != year:
            logger.info(f"No nominations recorded for {year}, showing {effective_year}")

        if self.coordinator is None:
            items: Optional[Dict[str, List[Dict]]] = {}
        else:
            self.is_loading = True
            if categories:
                self.error = None
            try:
                items = await self.coordinator.run(categories)
            except Exception as e:
                logger.error(f"Batch resolution for {effective_year} failed to start: {e}")
                self.is_loading = False
                self.view = None
                self.error = FEED_ERROR_MESSAGE
                raise
            if items is None:
                return None
            self.is_loading = False

        self.view = build_view(categories, items, year, effective_year, self.current_year)

        if self.view.is_empty:
            logger.info(f"No Oscar data available for {year}")

        return self.view
