#!/usr/bin/env python3
"""
Data containers for nomination records, film references and category views
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from awards.constants import (
    KEY_PREFIX_ID, KEY_PREFIX_TITLE,
    MODE_LABEL_NOMINEES, MODE_LABEL_WINNERS,
)


def parse_tmdb_id(value: Any) -> Optional[int]:
    """Coerce a feed id value to a positive int, or None"""
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return None
    return parsed if parsed > 0 else None


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class RawMovieRef:
    """One film reference exactly as it appears in a feed record"""
    title: str
    tmdb_id: Optional[int] = None
    imdb_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> 'RawMovieRef':
        title = data.get('title')
        return cls(
            title=title if isinstance(title, str) else '',
            tmdb_id=parse_tmdb_id(data.get('tmdb_id')),
            imdb_id=_optional_str(data.get('imdb_id')),
        )


@dataclass(frozen=True)
class NominationRecord:
    """One category/year/movies/won entry from the nomination feed"""
    category: str
    year: str
    movies: Tuple[RawMovieRef, ...] = ()
    won: Optional[bool] = None
    nominees: Tuple[str, ...] = ()  # Person/credit names, unused for resolution

    @classmethod
    def from_dict(cls, data: Dict) -> 'NominationRecord':
        movies = data.get('movies') or []
        nominees = data.get('nominees') or []
        won = data.get('won')
        return cls(
            category=str(data.get('category') or ''),
            year=str(data.get('year') or ''),
            movies=tuple(
                RawMovieRef.from_dict(movie) for movie in movies
                if isinstance(movie, dict)
            ),
            won=won if isinstance(won, bool) else None,
            nominees=tuple(str(n) for n in nominees if n),
        )


@dataclass(frozen=True)
class MovieRef:
    """Normalized film reference; title is always non-empty"""
    title: str
    tmdb_id: Optional[int] = None
    imdb_id: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: RawMovieRef) -> Optional['MovieRef']:
        """Return None when the reference has no usable title"""
        title = (raw.title or '').strip()
        if not title:
            return None
        return cls(title=title, tmdb_id=raw.tmdb_id, imdb_id=raw.imdb_id)

    @property
    def key(self) -> str:
        return reference_key(self)


def reference_key(ref: MovieRef) -> str:
    """
    Deterministic dedup key for a film reference

    Same TMDb id → same key regardless of title spelling.
    Without an id, references share a key only on case-insensitive title equality.
    """
    if ref.tmdb_id:
        return f"{KEY_PREFIX_ID}{ref.tmdb_id}"
    return f"{KEY_PREFIX_TITLE}{ref.title.lower()}"


@dataclass
class Category:
    """Nominees and winners of one award category, keyed by reference key"""
    name: str
    nominees: Dict[str, MovieRef] = field(default_factory=dict)
    winners: Dict[str, MovieRef] = field(default_factory=dict)

    def nominee_refs(self) -> List[MovieRef]:
        return list(self.nominees.values())

    def winner_refs(self) -> List[MovieRef]:
        return list(self.winners.values())

    @property
    def has_winners(self) -> bool:
        return bool(self.winners)


@dataclass
class CategoryView:
    """Display payload for one category"""
    name: str
    items: List[Dict] = field(default_factory=list)
    winner_titles: List[str] = field(default_factory=list)

    @property
    def has_items(self) -> bool:
        return bool(self.items)

    def to_dict(self) -> Dict:
        return {
            'name': self.name,
            'items': list(self.items),
            'winner_titles': list(self.winner_titles),
        }


@dataclass
class AwardsView:
    """Full payload for one selected year"""
    requested_year: int
    effective_year: int
    show_winners: bool
    categories: List[CategoryView] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to show for this selection (not an error)"""
        return not any(category.has_items for category in self.categories)

    @property
    def mode_label(self) -> str:
        return MODE_LABEL_WINNERS if self.show_winners else MODE_LABEL_NOMINEES

    def to_dict(self) -> Dict:
        return {
            'requested_year': self.requested_year,
            'effective_year': self.effective_year,
            'show_winners': self.show_winners,
            'mode_label': self.mode_label,
            'categories': [category.to_dict() for category in self.categories],
        }
