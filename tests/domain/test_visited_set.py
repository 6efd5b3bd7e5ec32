import threading

from wordcrawl.domain.visited_set import VisitedSet


def test_url_not_visited_initially():
    visited = VisitedSet()
    assert "https://example.com" not in visited
    assert len(visited) == 0


def test_adding_url_makes_it_visited():
    visited = VisitedSet()
    assert visited.add("https://example.com")
    assert "https://example.com" in visited


def test_different_urls_tracked_independently():
    visited = VisitedSet()
    visited.add("https://example.com")
    assert "https://example.com" in visited
    assert "https://other.com" not in visited


def test_second_add_of_same_url_is_rejected():
    visited = VisitedSet()
    assert visited.add("https://example.com")
    assert not visited.add("https://example.com")
    assert len(visited) == 1

def test_exactly_one_thread_claims_each_url():
    visited = VisitedSet()
    urls = [f"https://example.com/{i}" for i in range(50)]
    wins = []
    wins_lock = threading.Lock()
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        mine = [u for u in urls if visited.add(u)]
        with wins_lock:
            wins.extend(mine)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(wins) == sorted(urls)
    assert len(visited) == len(urls)
