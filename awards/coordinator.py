#!/usr/bin/env python3
"""
Batch resolution: resolve every unique film reference of a year once,
concurrently, then scatter results back into per-category item lists.

Lookup cost is O(unique films), not O(nomination slots). Results are only
published after every lookup has settled, and only if no newer batch has
started in the meantime (generation stamp).
"""

import asyncio
import logging
from typing import Dict, List, Mapping, Optional

from awards.grouping import unique_references
from awards.models import Category

logger = logging.getLogger(__name__)


async def resolve_all(categories: Mapping[str, Category], resolver) -> Dict[str, List[Dict]]:
    """
    Resolve all nominees of all categories

    Returns:
        Dict of category name → resolved media dicts in nominee order.
        Unresolved references are dropped.
    """
    unique = unique_references(categories.values())
    if not unique:
        return {name: [] for name in categories}

    keys = list(unique)
    outcomes = await asyncio.gather(
        *(resolver.resolve(unique[key]) for key in keys),
        return_exceptions=True
    )

    resolved: Dict[str, Optional[Dict]] = {}
    for key, outcome in zip(keys, outcomes):
        if isinstance(outcome, Exception):
            logger.warning(f"Lookup for {key} raised {outcome!r}, treating as unresolved")
            outcome = None
        resolved[key] = outcome

    hits = sum(1 for media in resolved.values() if media)
    logger.info(f"Resolved {hits}/{len(resolved)} unique films across {len(categories)} categories")

    return {
        name: [resolved[key] for key in category.nominees if resolved.get(key)]
        for name, category in categories.items()
    }


class BatchResolutionCoordinator:
    """
    Owns the committed category → items state

    Every run() takes a new generation number; a run whose generation is no
    longer current when its lookups settle is discarded instead of committed.
    In-flight HTTP calls of a superseded run are not cancelled.
    """

    def __init__(self, resolver):
        self.resolver = resolver
        self.generation = 0
        self.committed_generation: Optional[int] = None
        self.category_items: Dict[str, List[Dict]] = {}

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def reset(self):
        """Supersede any in-flight run and clear committed state"""
        self.generation += 1
        self.committed_generation = None
        self.category_items = {}

    async def run(self, categories: Mapping[str, Category]) -> Optional[Dict[str, List[Dict]]]:
        """
        Resolve a category set and commit it if still current

        Returns the committed mapping, or None when a newer run superseded this one.
        """
        self.generation += 1
        generation = self.generation

        if not categories:
            items: Dict[str, List[Dict]] = {}
        else:
            items = await resolve_all(categories, self.resolver)

        if not self.is_current(generation):
            logger.debug(f"Discarding stale batch {generation} (current: {self.generation})")
            return None

        self.category_items = items
        self.committed_generation = generation
        return items
