"""Infrastructure layer — runtime concerns for the sleep personalization service.

Modules:
    metrics     Prometheus metrics registry.
"""
