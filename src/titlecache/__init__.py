"""titlecache: a cached title behind a refreshable repository."""

__version__ = "0.1.0"
