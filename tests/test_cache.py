import threading
import unittest

from app.core.cache import ProfileCache
from app.models import Profile


class TestProfileCache(unittest.TestCase):
    def test_get_missing_returns_none(self) -> None:
        self.assertIsNone(ProfileCache().get("octocat"))

    def test_put_overwrites(self) -> None:
        cache = ProfileCache()
        cache.put("octocat", Profile(username="octocat", display_name="one"))
        cache.put("octocat", Profile(username="octocat", display_name="two"))

        self.assertEqual(len(cache), 1)
        self.assertEqual(cache.get("octocat").display_name, "two")

    def test_clear(self) -> None:
        cache = ProfileCache()
        cache.put("octocat", Profile(username="octocat"))
        cache.clear()
        self.assertNotIn("octocat", cache)

    def test_concurrent_writers(self) -> None:
        cache = ProfileCache()
        names = [f"user-{i % 20}" for i in range(400)]

        def write(name: str) -> None:
            cache.put(name, Profile(username=name))
            self.assertIsNotNone(cache.get(name))

        threads = [threading.Thread(target=write, args=(name,)) for name in names]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(cache), 20)
