"""
Tests for request IDs and the metrics collector.
"""
import re

from chromascope.utils.ids import generate_request_id
from chromascope.utils.metrics import MetricsCollector


class TestRequestIds:

    def test_format(self):
        request_id = generate_request_id("ana")
        assert re.match(r"^ana-\d{14}-[0-9a-f]{8}$", request_id)

    def test_unique(self):
        assert generate_request_id() != generate_request_id()


class TestMetricsCollector:

    def test_counters(self):
        metrics = MetricsCollector()
        metrics.increment_request_count()
        metrics.increment_request_count()
        metrics.increment_failure_count("sampling")
        metrics.increment_harmony_count("Mixed Harmony")

        counters = metrics.get_counters()
        assert counters["analyze_requests_total"] == 2
        assert counters["analyze_failed_total_sampling"] == 1
        assert counters["analyze_harmony_mixed_harmony"] == 1

    def test_timing_stats(self):
        metrics = MetricsCollector()
        for value in [10.0, 20.0, 30.0, 40.0, 50.0]:
            metrics.record_timing("analyze", value)

        stats = metrics.get_timing_stats()["analyze_duration_ms"]
        assert stats["count"] == 5
        assert stats["mean"] == 30.0
        assert stats["min"] == 10.0
        assert stats["max"] == 50.0
        assert stats["p50"] == 30.0
        assert abs(stats["p95"] - 48.0) < 1e-9

    def test_palette_sizes_and_reset(self):
        metrics = MetricsCollector()
        assert metrics.get_palette_size_stats() == {}
        metrics.record_palette_size(5)
        metrics.record_palette_size(1)
        assert metrics.get_palette_size_stats()["mean"] == 3

        metrics.reset()
        assert metrics.get_counters() == {}
        assert metrics.get_palette_size_stats() == {}
