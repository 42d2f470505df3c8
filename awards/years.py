#!/usr/bin/env python3
"""
Ceremony year selection

The feed sometimes labels a ceremony by the year it was held rather than
the eligibility year, so a requested year with no records falls back one year.
"""

import logging
from typing import List, Sequence

from awards.constants import MIN_YEAR
from awards.models import NominationRecord

logger = logging.getLogger(__name__)


def select_effective_year(records: Sequence[NominationRecord], requested_year: int) -> int:
    """
    Determine which feed year to read for a requested year

    Returns requested_year if any record matches it exactly, requested_year - 1
    when records exist but none match, and requested_year when there are no records.
    """
    year_key = str(requested_year)
    if not records:
        return requested_year
    if any(record.year == year_key for record in records):
        return requested_year

    logger.debug(f"No feed records for {requested_year}, falling back to {requested_year - 1}")
    return requested_year - 1


def available_years(current_year: int, min_year: int = MIN_YEAR) -> List[int]:
    """Selectable years, newest first"""
    if min_year > current_year:
        raise ValueError(f"min_year {min_year} is after current year {current_year}")
    return list(range(current_year, min_year - 1, -1))
