import threading
from typing import Dict, Mapping


def _popularity_key(item):
    word, count = item
    return (-count, -len(word), word)


def sort_word_counts(word_counts: Mapping[str, int], popular_word_count: int) -> Dict[str, int]:
    """Return the `popular_word_count` most frequent words, most popular first.

    Ties on count are broken by longer word first, then alphabetically, so
    identical input always yields identical output.
    """
    if popular_word_count < 0:
        raise ValueError("popular_word_count must be >= 0")
    ranked = sorted(word_counts.items(), key=_popularity_key)
    return dict(ranked[:popular_word_count])


class WordCountAggregator:
    """Thread-safe word -> count accumulator shared by all crawl tasks."""

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: Dict[str, int] = {}

    def merge(self, word_counts: Mapping[str, int]) -> None:
        """Add `word_counts` into the totals key by key."""
        for word, count in word_counts.items():
            if count < 0:
                raise ValueError(f"negative count for {word!r}: {count}")
        with self._lock:
            for word, count in word_counts.items():
                self._counts[word] = self._counts.get(word, 0) + count

    def is_empty(self) -> bool:
        with self._lock:
            return not self._counts

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def top(self, popular_word_count: int) -> Dict[str, int]:
        return sort_word_counts(self.snapshot(), popular_word_count)
