"""Tests for meter.latency -- HTTP round-trip probing."""

import unittest

import aiohttp
from aiohttp import web
from aiohttp.test_utils import AioHTTPTestCase

from meter.config import Settings
from meter.latency import LatencyResult, LatencyTester


class FakeClock:
    """Returns scripted timestamps, repeating the last one when exhausted."""

    def __init__(self, *values):
        self._values = list(values)

    def __call__(self):
        if len(self._values) > 1:
            return self._values.pop(0)
        return self._values[0]


def probe_clock(*samples_ms):
    """Clock yielding (start, headers-received) pairs for each sample."""
    ticks = []
    for i, ms in enumerate(samples_ms):
        start = float(i * 10)
        ticks.extend([start, start + ms / 1000])
    return FakeClock(*ticks)


class TestLatencyResult(unittest.TestCase):
    def test_calculate_mean(self):
        r = LatencyResult(samples=[10.0, 20.0, 30.0, 40.0, 50.0])
        r.calculate()
        self.assertEqual(f"{r.mean_ms:.2f}", "30.00")
        self.assertAlmostEqual(r.min_ms, 10.0)
        self.assertAlmostEqual(r.max_ms, 50.0)

    def test_calculate_empty_raises(self):
        with self.assertRaises(ValueError):
            LatencyResult().calculate()

    def test_to_dict(self):
        r = LatencyResult(url="http://x", samples=[1.234, 5.678])
        r.calculate()
        d = r.to_dict()
        self.assertEqual(d["samples"], [1.23, 5.68])
        self.assertEqual(d["url"], "http://x")
        self.assertAlmostEqual(d["mean_ms"], 3.46)


class TestLatencyOverHttp(AioHTTPTestCase):
    async def get_application(self):
        self.hits = 0

        async def ping(request):
            self.hits += 1
            return web.Response(text="pong")

        async def flaky(request):
            self.hits += 1
            return web.Response(status=503)

        app = web.Application()
        app.router.add_get("/ping", ping)
        app.router.add_get("/flaky", flaky)
        return app

    def _settings(self, path="/ping", **kwargs):
        return Settings(ping_url=str(self.server.make_url(path)), **kwargs)

    async def test_mean_of_five_samples(self):
        tester = LatencyTester(self._settings(), clock=probe_clock(10, 20, 30, 40, 50))
        result = await tester.test()

        self.assertEqual(self.hits, 5)
        self.assertEqual(len(result.samples), 5)
        for got, want in zip(result.samples, [10, 20, 30, 40, 50]):
            self.assertAlmostEqual(got, want)
        self.assertEqual(f"{result.mean_ms:.2f}", "30.00")

    async def test_sample_count_follows_settings(self):
        tester = LatencyTester(self._settings(ping_count=2))
        result = await tester.test()
        self.assertEqual(self.hits, 2)
        self.assertEqual(len(result.samples), 2)
        self.assertGreaterEqual(result.mean_ms, 0.0)

    async def test_error_status_aborts_sequence(self):
        tester = LatencyTester(self._settings("/flaky"))
        with self.assertRaises(aiohttp.ClientResponseError):
            await tester.test()
        self.assertEqual(self.hits, 1)


class TestLatencyUnreachable(unittest.IsolatedAsyncioTestCase):
    async def test_connection_refused(self):
        # Nothing listens on the discard port in test environments.
        tester = LatencyTester(Settings(ping_url="http://127.0.0.1:9/"))
        with self.assertRaises(aiohttp.ClientConnectionError):
            await tester.test()


if __name__ == "__main__":
    unittest.main()
