#!/usr/bin/env python3
"""
Test suite for awards/view.py - winner visibility and category payloads
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from awards.grouping import group_by_category
from awards.view import assemble, build_view, should_show_winners


def _categories(make_records, won=True, year='2026'):
    records = make_records(
        {'category': 'Best Picture', 'year': year, 'movies': [{'title': 'Winner Film'}], 'won': won},
        {'category': 'Best Picture', 'year': year, 'movies': [{'title': 'Other Film'}], 'won': False},
        {'category': 'Editing', 'year': year, 'movies': [{'title': 'Other Film'}]},
    )
    return group_by_category(records, int(year))


class TestShouldShowWinners:

    def test_past_year_always_shows(self, make_records):
        categories = _categories(make_records, won=False, year='2020')
        assert should_show_winners(categories, 2020, 2026)

    def test_past_year_without_categories(self):
        assert should_show_winners({}, 2020, 2026)

    def test_current_year_with_winner(self, make_records):
        assert should_show_winners(_categories(make_records, won=True), 2026, 2026)

    def test_current_year_without_winner(self, make_records):
        assert not should_show_winners(_categories(make_records, won=False), 2026, 2026)


class TestAssemble:

    def test_winner_titles_only_when_shown(self, make_records):
        categories = _categories(make_records)
        views = assemble(categories, {}, show_winners=False)
        assert all(view.winner_titles == [] for view in views)

    def test_winner_titles_populated(self, make_records):
        categories = _categories(make_records)
        views = {view.name: view for view in assemble(categories, {}, show_winners=True)}
        assert views['Best Picture'].winner_titles == ['Winner Film']
        assert views['Editing'].winner_titles == []

    def test_items_follow_resolved_mapping(self, make_records):
        categories = _categories(make_records)
        resolved = {'Best Picture': [{'id': 1}, {'id': 2}]}
        views = assemble(categories, resolved, show_winners=True)
        assert [view.name for view in views] == ['Best Picture', 'Editing']
        assert views[0].items == [{'id': 1}, {'id': 2}]
        assert views[1].items == []
        assert not views[1].has_items


class TestBuildView:

    def test_mode_label_and_flags(self, make_records):
        categories = _categories(make_records, won=False)
        view = build_view(categories, {'Editing': [{'id': 3}]}, 2026, 2026, 2026)
        assert not view.show_winners
        assert view.mode_label == "Nominees"
        assert not view.is_empty

    def test_empty_when_nothing_resolved(self, make_records):
        view = build_view(_categories(make_records), {}, 2026, 2026, 2026)
        assert view.is_empty
        assert view.mode_label == "Nominees and winners"

    def test_to_dict(self, make_records):
        view = build_view(_categories(make_records), {'Editing': [{'id': 3}]}, 2027, 2026, 2027)
        payload = view.to_dict()
        assert payload['requested_year'] == 2027
        assert payload['effective_year'] == 2026
        assert payload['show_winners'] is True
        assert payload['categories'][1] == {'name': 'Editing', 'items': [{'id': 3}], 'winner_titles': []}
