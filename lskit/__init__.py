"""Building blocks for ls-style listings: string helpers, collation, colour classes and column layout."""

__version__ = "0.1.0"