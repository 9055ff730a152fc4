# --- path/bootstrap (keep this at the very top) ---
from pathlib import Path
import sys

SRC = Path(__file__).resolve().parents[1] / "src"
if SRC.is_dir() and str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
# --- end path/bootstrap ---

import json
import logging
import os
import tempfile
import unittest
from unittest import mock

from shopping_system.config import ShopConfig, load_config
from shopping_system.logging_config import LOG_FILE_NAME, JsonFormatter, configure_logging
from shopping_system.metrics import Counter, Gauge, Histogram, generate_metrics_text


class TestJsonLogging(unittest.TestCase):

    def tearDown(self):
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

    def test_formatter_merges_extra_context(self):
        record = logging.LogRecord("shop", logging.INFO, __file__, 1, "Order created", None, None)
        record.extra = {"order_id": 3, "payment_method": "Cash"}
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["message"], "Order created")
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["order_id"], 3)
        self.assertEqual(payload["payment_method"], "Cash")

    def test_configure_logging_writes_json_lines(self):
        log_dir = os.path.join(tempfile.mkdtemp(), "logs")
        with mock.patch("sys.stderr"):
            configure_logging(log_dir)
        logging.getLogger("shopping_system.test").info(
            "hello", extra={"extra": {"cart_lines": 2}}
        )
        for handler in logging.getLogger().handlers:
            handler.flush()
        with open(os.path.join(log_dir, LOG_FILE_NAME), encoding="utf-8") as fh:
            entries = [json.loads(line) for line in fh if line.strip()]
        self.assertEqual(entries[-1]["message"], "hello")
        self.assertEqual(entries[-1]["cart_lines"], 2)


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        config = ShopConfig()
        self.assertEqual(config.max_orders, 50)
        self.assertEqual(config.max_cart_lines, 100)
        self.assertEqual(config.max_products, 150)
        self.assertEqual(config.order_log_path, "order_log.txt")

    def test_environment_overrides(self):
        env = {"SHOP_ORDER_LOG": "/tmp/orders.txt", "SHOP_LOG_DIR": "/tmp/shop-logs"}
        with mock.patch.dict(os.environ, env):
            config = load_config()
        self.assertEqual(config.order_log_path, "/tmp/orders.txt")
        self.assertEqual(config.log_dir, "/tmp/shop-logs")
        self.assertEqual(config.max_orders, 50)


class TestMetrics(unittest.TestCase):

    def test_counter_and_gauge(self):
        counter = Counter("test_events_total", "Test events", ["kind"])
        counter.inc(kind="a")
        counter.inc(kind="a")
        counter.inc(kind="b")
        self.assertEqual(counter.value(kind="a"), 2)
        self.assertEqual(counter.value(kind="c"), 0)

        gauge = Gauge("test_level", "Test level", [])
        gauge.set(3)
        self.assertEqual(gauge.value(), 3.0)

        text = generate_metrics_text().decode("utf-8")
        self.assertIn('test_events_total{kind="a"} 2', text)
        self.assertIn("test_level 3.0", text)

    def test_histogram_buckets_are_cumulative(self):
        hist = Histogram("test_amount", "Test amount", [], buckets=[10, 100])
        for value in (5, 50, 500):
            hist.observe(value)
        lines = hist.to_prometheus()
        self.assertIn('test_amount_bucket{le="10.0"} 1', lines)
        self.assertIn('test_amount_bucket{le="100.0"} 2', lines)
        self.assertIn('test_amount_bucket{le="+Inf"} 3', lines)
        self.assertEqual(hist.count(), 3)


if __name__ == "__main__":
    unittest.main(verbosity=2)
