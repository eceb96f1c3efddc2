"""
Observability components.

Provides structured logging and metrics collection for collection facades.
"""

from .logging import (
    CollectionLoggerAdapter,
    clear_correlation_id,
    collection_context,
    current_log_fields,
    get_correlation_id,
    get_logger,
    log_operation,
    set_correlation_id,
)
from .metrics import (
    MetricsCollector,
    OperationMetrics,
    get_metrics_collector,
    record_operation,
)

__all__ = [
    # Metrics
    "MetricsCollector",
    "OperationMetrics",
    "get_metrics_collector",
    "record_operation",
    # Logging
    "get_correlation_id",
    "set_correlation_id",
    "clear_correlation_id",
    "collection_context",
    "current_log_fields",
    "CollectionLoggerAdapter",
    "get_logger",
    "log_operation",
]
