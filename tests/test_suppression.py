import unittest

from Tint.suppression import Repeat, SuppressionCache


class FakeClock(object):
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestSuppressionCache(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.clock.now = 10000
        self.cache = SuppressionCache(enabled=True, timeout=1000, clock=self.clock)

    def test_disabled_never_repeats(self):
        cache = SuppressionCache(clock=self.clock)
        self.assertEqual(cache.check("info", "a"), Repeat())
        self.assertEqual(cache.check("info", "a"), Repeat())

    def test_repeat_within_window(self):
        self.assertEqual(self.cache.check("info", "a"), Repeat(False, 0, 0))
        self.clock.now += 500
        self.assertEqual(self.cache.check("info", "a"), Repeat(True, 1, 0))
        self.clock.now += 400
        self.assertEqual(self.cache.check("info", "a"), Repeat(True, 2, 0))

    def test_window_measured_from_first_occurrence(self):
        self.cache.check("info", "a")
        self.clock.now += 900
        self.assertTrue(self.cache.check("info", "a").is_repeat)
        self.clock.now += 200
        self.assertEqual(self.cache.check("info", "a"), Repeat(False, 0, 1))

    def test_channels_are_independent(self):
        self.cache.check("info", "a")
        self.assertFalse(self.cache.check("warn", "a").is_repeat)
        self.assertFalse(self.cache.check("info", "b").is_repeat)

    def test_flush_hidden_without_counter(self):
        self.cache.configure(enabled=True, show_counter=False)
        self.cache.check("info", "a")
        self.cache.check("info", "a")
        self.clock.now += 5000
        self.assertEqual(self.cache.check("info", "a"), Repeat(False, 0, 0))

    def test_stats_and_reset(self):
        self.cache.check("error", "boom")
        self.cache.check("error", "boom")
        stats = self.cache.stats()
        self.assertEqual(stats["config"], {"enabled": True, "timeout": 1000, "show_counter": True})
        self.assertEqual(stats["counters"], [{"key": "error:boom", "count": 1}])

        self.cache.reset()
        self.assertEqual(self.cache.stats()["counters"], [])
        self.assertFalse(self.cache.check("error", "boom").is_repeat)

    def test_configure_reset_history(self):
        self.cache.check("info", "a")
        self.cache.configure(timeout=2000, reset_history=True)
        self.assertEqual(self.cache.timeout, 2000)
        self.assertFalse(self.cache.check("info", "a").is_repeat)

    def test_enable_disable(self):
        self.cache.disable()
        self.assertFalse(self.cache.enabled)
        self.cache.enable()
        self.assertTrue(self.cache.enabled)


if __name__ == "__main__":
    unittest.main()
