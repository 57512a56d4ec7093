import datetime as dt
import tempfile
import unittest
from pathlib import Path

from libweather.cache import cache_base_dir, cache_file, cache_get, cache_set
from libweather.config import Settings


class TestCache(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name)
        self.today = dt.date(2018, 3, 12)

    def tearDown(self):
        self._tmp.cleanup()

    def test_path_layout(self):
        path = cache_file("tiempo", "30721", today=self.today, base_dir=self.base)
        self.assertEqual(path, self.base / "20180312" / "tiempo-30721")
        self.assertTrue(path.parent.is_dir())

    def test_default_base_is_under_tempdir(self):
        settings = Settings(cache_dir=None)
        self.assertEqual(cache_base_dir(settings), Path(tempfile.gettempdir()) / "libweather")
        settings = Settings(cache_dir=self.base)
        self.assertEqual(cache_base_dir(settings), self.base)

    def test_miss_returns_none(self):
        self.assertIsNone(cache_get("tiempo", "30721", today=self.today, base_dir=self.base))

    def test_round_trip_is_byte_identical(self):
        payload = "<report><location city=\"Perugia\"/></report>\n".encode("utf-8")
        self.assertTrue(cache_set("tiempo", "30721", payload, today=self.today, base_dir=self.base))
        self.assertEqual(cache_get("tiempo", "30721", today=self.today, base_dir=self.base), payload)

    def test_new_day_is_a_new_key(self):
        cache_set("tiempo", "30721", b"<report/>", today=self.today, base_dir=self.base)
        tomorrow = self.today + dt.timedelta(days=1)
        self.assertIsNone(cache_get("tiempo", "30721", today=tomorrow, base_dir=self.base))
        # the old entry is orphaned, not deleted
        self.assertTrue((self.base / "20180312" / "tiempo-30721").exists())

    def test_keys_are_per_driver_and_location(self):
        cache_set("tiempo", "30721", b"a", today=self.today, base_dir=self.base)
        self.assertIsNone(cache_get("tiempo", "31553", today=self.today, base_dir=self.base))
        self.assertIsNone(cache_get("other", "30721", today=self.today, base_dir=self.base))

    def test_unwritable_base_is_ignored(self):
        # a regular file where the cache root should be: mkdir fails
        blocker = self.base / "blocker"
        blocker.write_text("x")
        self.assertFalse(cache_set("tiempo", "30721", b"<report/>", today=self.today, base_dir=blocker))
        self.assertIsNone(cache_get("tiempo", "30721", today=self.today, base_dir=blocker))

    def test_unreadable_entry_is_a_miss(self):
        # a directory where the entry file should be: reading fails
        (self.base / "20180312" / "tiempo-30721").mkdir(parents=True)
        self.assertIsNone(cache_get("tiempo", "30721", today=self.today, base_dir=self.base))


if __name__ == "__main__":
    unittest.main()
