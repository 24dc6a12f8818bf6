"""cache_manager exception hierarchy.

The cache core never raises for normal control flow; these cover the
configuration and file handling of the replay tooling.
"""


class CacheManagerError(Exception):
    """Base exception for all cache_manager errors."""


class ConfigError(CacheManagerError):
    """Raised for invalid generator or replay configuration."""


class OpLogNotFoundError(CacheManagerError):
    """Raised when the operation log file does not exist."""

    def __init__(self, path):
        super().__init__(f"Operations file not found: {path}")
        self.path = path
