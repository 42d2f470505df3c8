#!/usr/bin/env python3
"""
Shared constants for the Oscar nomination reconciliation pipeline

Single source of truth for feed location, TMDb endpoints and the
labels surfaced to the caller.
"""

# Open, year-by-year Oscar nominations dataset (static JSON array)
OSCAR_FEED_URL = (
    "https://raw.githubusercontent.com/delventhalz/json-nominations/"
    "master/oscar-nominations.json"
)

TMDB_BASE_URL = "https://api.themoviedb.org/3"
TMDB_DEFAULT_LANGUAGE = "en-US"

# Oldest selectable ceremony year
MIN_YEAR = 1980

REQUEST_TIMEOUT = 10
MAX_CONCURRENT_LOOKUPS = 8

# The feed only nominates films, so every resolved record is tagged as a movie
MEDIA_TYPE_MOVIE = "movie"

# Reference key prefixes
KEY_PREFIX_ID = "id:"
KEY_PREFIX_TITLE = "title:"

# /search/multi media_type → partition name
SEARCH_PARTITIONS = {
    'movie': 'movies',
    'tv': 'tv',
    'person': 'people',
}

# TMDb movie genre IDs (as of 2024)
TMDB_GENRES = {
    28: 'Action',
    12: 'Adventure',
    16: 'Animation',
    35: 'Comedy',
    80: 'Crime',
    99: 'Documentary',
    18: 'Drama',
    10751: 'Family',
    14: 'Fantasy',
    36: 'History',
    27: 'Horror',
    10402: 'Music',
    9648: 'Mystery',
    10749: 'Romance',
    878: 'Science Fiction',
    10770: 'TV Movie',
    53: 'Thriller',
    10752: 'War',
    37: 'Western',
}

FEED_ERROR_MESSAGE = "Could not load Oscar titles."
MODE_LABEL_WINNERS = "Nominees and winners"
MODE_LABEL_NOMINEES = "Nominees"
