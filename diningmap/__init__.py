"""Scrape, clean, geocode and correct a university's list of dining locations."""

__version__ = "0.1.0"
