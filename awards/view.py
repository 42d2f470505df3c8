#!/usr/bin/env python3
"""
Combine categories, resolved items and winner flags into display payloads
"""

from typing import Dict, List, Mapping

from awards.models import AwardsView, Category, CategoryView


def should_show_winners(categories: Mapping[str, Category], effective_year: int, current_year: int) -> bool:
    """
    Past ceremonies always show winners; the current year's only once
    the feed already lists at least one winner.
    """
    if effective_year < current_year:
        return True
    return any(category.has_winners for category in categories.values())


def assemble(categories: Mapping[str, Category], resolved_items: Mapping[str, List[Dict]],
             show_winners: bool) -> List[CategoryView]:
    views = []
    for name, category in categories.items():
        winner_titles = []
        if show_winners and category.has_winners:
            winner_titles = [ref.title for ref in category.winner_refs()]
        views.append(CategoryView(
            name=name,
            items=list(resolved_items.get(name) or []),
            winner_titles=winner_titles,
        ))
    return views


def build_view(categories: Mapping[str, Category], resolved_items: Mapping[str, List[Dict]],
               requested_year: int, effective_year: int, current_year: int) -> AwardsView:
    show_winners = should_show_winners(categories, effective_year, current_year)
    return AwardsView(
        requested_year=requested_year,
        effective_year=effective_year,
        show_winners=show_winners,
        categories=assemble(categories, resolved_items, show_winners),
    )
