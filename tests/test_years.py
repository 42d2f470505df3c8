#!/usr/bin/env python3
"""
Test suite for awards/years.py - effective year selection and year range
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from awards.years import select_effective_year, available_years


def _record(year):
    return {'category': 'Best Picture', 'year': year, 'movies': [{'title': 'Film'}]}


class TestSelectEffectiveYear:
    """Requested year, else one year back, else unchanged"""

    def test_exact_match_wins(self, make_records):
        records = make_records(_record('2023'), _record('2022'))
        assert select_effective_year(records, 2023) == 2023

    def test_falls_back_one_year(self, make_records):
        records = make_records(_record('2020'))
        assert select_effective_year(records, 2021) == 2020

    def test_fallback_even_when_previous_year_missing(self, make_records):
        """Fallback is unconditional once records exist"""
        records = make_records(_record('1999'))
        assert select_effective_year(records, 2024) == 2023

    def test_empty_records_keep_requested_year(self):
        assert select_effective_year([], 2024) == 2024

    def test_year_compared_as_string(self, make_records):
        records = make_records({'category': 'X', 'year': 2023, 'movies': []})
        assert records[0].year == '2023'
        assert select_effective_year(records, 2023) == 2023


class TestAvailableYears:

    def test_newest_first(self):
        years = available_years(2026, min_year=2020)
        assert years == [2026, 2025, 2024, 2023, 2022, 2021, 2020]

    def test_default_min_year(self):
        years = available_years(2026)
        assert years[-1] == 1980
        assert len(years) == 47

    def test_single_year(self):
        assert available_years(1980, min_year=1980) == [1980]

    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError):
            available_years(1979, min_year=1980)
