"""Host-side utilities for graph workloads: integer helpers, statistics, text formatting, bit matrices, a fixed-capacity collection, timers, memory helpers and edge batch generation."""

__version__ = "0.1.0"

__all__ = [
    "numeric",
    "statistics",
    "printing",
    "bits",
    "collection",
    "timer",
    "hostmem",
    "batch",
]