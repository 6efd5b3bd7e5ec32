import threading
from typing import Set


class VisitedSet:
    """
    Thread-safe set of URLs already claimed for processing during a crawl.

    `add` is an atomic add-if-absent: for a given URL exactly one caller
    receives True for the lifetime of the set. Entries are never evicted,
    since forgetting a URL would let a second task fetch it.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: Set[str] = set()

    def add(self, url: str) -> bool:
        """Claim `url`. Returns False if it was already claimed."""
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def __contains__(self, url: str) -> bool:
        with self._lock:
            return url in self._visited

    def __len__(self) -> int:
        with self._lock:
            return len(self._visited)
