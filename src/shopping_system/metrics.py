"""Simple metrics library using only the Python standard library.

This module provides a minimal implementation of counters, gauges, and
histograms similar to Prometheus.  Metrics are collected in global
objects and can be exported in the Prometheus text exposition format
with :func:`generate_metrics_text`.
"""

from collections import defaultdict
from threading import Lock
from typing import Dict, Iterable, List, Tuple


class Metric:
    """Base class for all metrics."""

    def __init__(self, name: str, description: str, label_names: Iterable[str]):
        self.name = name
        self.description = description
        self.label_names = list(label_names)
        self._lock = Lock()
        _METRIC_REGISTRY.append(self)

    def _label_tuple(self, labels: Dict[str, str]) -> Tuple[str, ...]:
        return tuple(str(labels.get(k, "")) for k in self.label_names)

    def _format_labels(self, label_values: Tuple[str, ...]) -> str:
        if not self.label_names:
            return ""
        pairs = [f'{name}="{value}"' for name, value in zip(self.label_names, label_values)]
        return "{" + ",".join(pairs) + "}"

    def to_prometheus(self) -> List[str]:
        """Return a list of strings in Prometheus exposition format."""
        raise NotImplementedError


class Counter(Metric):
    """Simple counter metric.  Call ``inc()`` to increment by 1.

    The ``inc`` method accepts keyword arguments matching the label
    names provided at construction time.  Example:

    ``ORDERS_CREATED_TOTAL.inc(payment_method="Cash")``
    """

    def __init__(self, name: str, description: str, label_names: Iterable[str]):
        super().__init__(name, description, label_names)
        self._values: Dict[Tuple[str, ...], int] = defaultdict(int)

    def inc(self, **labels: str) -> None:
        label_tuple = self._label_tuple(labels)
        with self._lock:
            self._values[label_tuple] += 1

    def value(self, **labels: str) -> int:
        """Return the current count for the given label values."""
        with self._lock:
            return self._values.get(self._label_tuple(labels), 0)

    def to_prometheus(self) -> List[str]:
        lines = [f"# HELP {self.name} {self.description}", f"# TYPE {self.name} counter"]
        with self._lock:
            for label_values, value in self._values.items():
                label_str = self._format_labels(label_values)
                lines.append(f"{self.name}{label_str} {value}")
        return lines


class Gauge(Metric):
    """Gauge metric representing a single numeric value or labeled values.

    Use ``set()`` to assign a value.  Gauges may go up or down.
    """

    def __init__(self, name: str, description: str, label_names: Iterable[str]):
        super().__init__(name, description, label_names)
        self._values: Dict[Tuple[str, ...], float] = {}

    def set(self, value: float, **labels: str) -> None:
        label_tuple = self._label_tuple(labels)
        with self._lock:
            self._values[label_tuple] = float(value)

    def value(self, **labels: str) -> float:
        with self._lock:
            return self._values.get(self._label_tuple(labels), 0.0)

    def to_prometheus(self) -> List[str]:
        lines = [f"# HELP {self.name} {self.description}", f"# TYPE {self.name} gauge"]
        with self._lock:
            for label_values, value in self._values.items():
                label_str = self._format_labels(label_values)
                lines.append(f"{self.name}{label_str} {value}")
        return lines


class Histogram(Metric):
    """Histogram metric with configurable buckets.

    Buckets must be an ascending list of upper bounds (float).  Values
    greater than the largest bucket are counted in the ``+Inf`` bucket.
    ``observe(value, **labels)`` records a new observation.
    """

    def __init__(self, name: str, description: str, label_names: Iterable[str], buckets: Iterable[float]):
        super().__init__(name, description, label_names)
        self.buckets = sorted(float(b) for b in buckets)
        # counts[label_tuple][i] = observations falling into bucket i
        self.counts: Dict[Tuple[str, ...], List[int]] = defaultdict(lambda: [0] * len(self.buckets))
        self.sums: Dict[Tuple[str, ...], float] = defaultdict(float)
        self.total_counts: Dict[Tuple[str, ...], int] = defaultdict(int)

    def observe(self, value: float, **labels: str) -> None:
        label_tuple = self._label_tuple(labels)
        value = float(value)
        with self._lock:
            for idx, b in enumerate(self.buckets):
                if value <= b:
                    self.counts[label_tuple][idx] += 1
                    break
            self.total_counts[label_tuple] += 1
            self.sums[label_tuple] += value

    def count(self, **labels: str) -> int:
        with self._lock:
            return self.total_counts.get(self._label_tuple(labels), 0)

    def to_prometheus(self) -> List[str]:
        lines = [f"# HELP {self.name} {self.description}", f"# TYPE {self.name} histogram"]
        with self._lock:
            for label_values in self.total_counts.keys():
                label_str = self._format_labels(label_values)
                cumulative = 0
                for idx, upper in enumerate(self.buckets):
                    cumulative += self.counts[label_values][idx]
                    if label_str:
                        bucket_labels = label_str[:-1] + f',le="{upper}"' + '}'
                    else:
                        bucket_labels = '{le="' + str(upper) + '"}'
                    lines.append(f"{self.name}_bucket{bucket_labels} {cumulative}")
                total = self.total_counts[label_values]
                if label_str:
                    inf_labels = label_str[:-1] + ',le="+Inf"}'
                else:
                    inf_labels = '{le="+Inf"}'
                lines.append(f"{self.name}_bucket{inf_labels} {total}")
                lines.append(f"{self.name}_sum{label_str} {self.sums[label_values]}")
                lines.append(f"{self.name}_count{label_str} {total}")
        return lines


_METRIC_REGISTRY: List[Metric] = []


def generate_metrics_text() -> bytes:
    """Generate the text representation of all registered metrics."""
    lines: List[str] = []
    for metric in _METRIC_REGISTRY:
        lines.extend(metric.to_prometheus())
    return "\n".join(lines).encode("utf-8")


# -----------------------------------------------------------------------------
# Metrics used by the shopping system.
# -----------------------------------------------------------------------------

# Orders recorded by the ledger, labelled by payment method display name
ORDERS_CREATED_TOTAL = Counter(
    name="orders_created_total",
    description="Total number of orders created",
    label_names=["payment_method"],
)

# Checkout attempts that did not produce an order, labelled by type
CHECKOUT_ERROR_TOTAL = Counter(
    name="checkout_error_total",
    description="Total number of checkout errors, labelled by type",
    label_names=["type"],
)

# Number of distinct lines currently held in the shopping cart
CART_LINES = Gauge(
    name="cart_lines",
    description="Number of lines in the shopping cart",
    label_names=[],
)

# Distribution of order totals in currency units
ORDER_TOTAL_AMOUNT = Histogram(
    name="order_total_amount",
    description="Order total amount",
    label_names=["payment_method"],
    buckets=[100.0, 250.0, 500.0, 1000.0, 2500.0, 5000.0],
)
