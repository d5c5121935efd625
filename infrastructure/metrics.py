"""Prometheus metrics for the sleep personalization service.

Exposes personalization context in metrics so dashboards show which
chronotypes and personas users land on, not just generic HTTP stats.

Metrics:
    sleep_personalization_requests_total   Counter by operation and status (ok/rejected)
    sleep_chronotype_results_total         Counter of classified chronotypes
    sleep_persona_results_total            Counter of classified personas
    sleep_recipe_latency_seconds           Histogram of recipe generation latency

Usage::

    from infrastructure.metrics import record_request, record_persona

    record_persona("Mind Quieter")
    record_request(operation="persona", status="ok")
"""

from __future__ import annotations

import logging
import time

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

logger = logging.getLogger(__name__)

_REGISTRY = CollectorRegistry()

personalization_requests_total = Counter(
    "sleep_personalization_requests_total",
    "Personalization requests by operation and status",
    ["operation", "status"],
    registry=_REGISTRY,
)

chronotype_results_total = Counter(
    "sleep_chronotype_results_total",
    "Chronotype classification outcomes",
    ["chronotype"],
    registry=_REGISTRY,
)

persona_results_total = Counter(
    "sleep_persona_results_total",
    "Nightly persona classification outcomes",
    ["persona"],
    registry=_REGISTRY,
)

recipe_latency_seconds = Histogram(
    "sleep_recipe_latency_seconds",
    "Recipe generation latency in seconds",
    ["persona"],
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1],
    registry=_REGISTRY,
)

logger.info("Prometheus metrics registry initialized")


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------


def record_request(*, operation: str, status: str) -> None:
    """Record a completed personalization request.

    Args:
        operation: "chronotype" | "persona" | "recipe" | "plan" |
            "audio_parameters" | "sleep_score".
        status: "ok" or "rejected".
    """
    personalization_requests_total.labels(operation=operation, status=status).inc()


def record_chronotype(chronotype: str) -> None:
    """Increment the counter for a classified chronotype."""
    chronotype_results_total.labels(chronotype=chronotype).inc()


def record_persona(persona: str) -> None:
    """Increment the counter for a classified persona."""
    persona_results_total.labels(persona=persona).inc()


def record_recipe_latency(*, persona: str, latency_seconds: float) -> None:
    """Observe one recipe generation.

    Args:
        persona: Persona the recipe was generated for.
        latency_seconds: Wall-clock time in seconds.
    """
    recipe_latency_seconds.labels(persona=persona).observe(latency_seconds)


def get_metrics_response() -> tuple[bytes, str]:
    """Generate Prometheus text exposition format.

    Returns:
        Tuple of (body_bytes, content_type_string).
    """
    return generate_latest(_REGISTRY), CONTENT_TYPE_LATEST


class LatencyTimer:
    """Context manager for measuring latency.

    Usage::

        with LatencyTimer() as t:
            recipe = generate_recipe(chronotype, persona)
        record_recipe_latency(persona=persona, latency_seconds=t.elapsed)
    """

    def __init__(self) -> None:
        """Initialize timer."""
        self._start: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> LatencyTimer:
        """Start timing."""
        self._start = time.perf_counter()
        return self

    def __exit__(self, *_: object) -> None:
        """Stop timing and record elapsed."""
        self.elapsed = time.perf_counter() - self._start
