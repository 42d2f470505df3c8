#!/usr/bin/env python3
"""
Group nomination records for one year into categories of unique film references

Dict insertion order doubles as the ordered set: the first reference seen
for a key is kept, later duplicates never overwrite it.
"""

import logging
from typing import Dict, Iterable, Sequence

from awards.models import Category, MovieRef, NominationRecord

logger = logging.getLogger(__name__)


def group_by_category(records: Sequence[NominationRecord], effective_year: int) -> Dict[str, Category]:
    """
    Partition the effective year's records into categories

    Returns:
        Dict of category name → Category, ordered by name (case-sensitive)
    """
    year_key = str(effective_year)
    categories: Dict[str, Category] = {}
    skipped = 0

    for record in records:
        if record.year != year_key:
            continue
        if not record.movies:
            continue

        category = categories.get(record.category)
        if category is None:
            category = Category(name=record.category)
            categories[record.category] = category

        for raw in record.movies:
            ref = MovieRef.from_raw(raw)
            if ref is None:
                skipped += 1
                continue

            key = ref.key
            category.nominees.setdefault(key, ref)
            # null/absent won is treated as "not a winner"
            if record.won is True:
                category.winners.setdefault(key, ref)

    if skipped:
        logger.debug(f"Skipped {skipped} untitled references for {year_key}")

    logger.info(f"Grouped {len(categories)} categories for {year_key}")

    return {name: categories[name] for name in sorted(categories)}


def unique_references(categories: Iterable[Category]) -> Dict[str, MovieRef]:
    """All unique nominee references across categories, first-seen order"""
    unique: Dict[str, MovieRef] = {}
    for category in categories:
        for ref in category.nominee_refs():
            unique.setdefault(ref.key, ref)
    return unique
