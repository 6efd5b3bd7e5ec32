"""Custom exceptions for wordcrawl."""


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors or a bad status."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class ConfigError(ValueError):
    """Raised when a crawler configuration is missing or invalid."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Config '{source}' {reason}")


class ProfilingConfigError(ValueError):
    """Raised when an object is wrapped for profiling without any operations to time."""
