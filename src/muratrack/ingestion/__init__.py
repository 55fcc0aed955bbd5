"""Ingestion layer.

Adapters that turn simulator output and remote store deliveries into
reducer events.
"""

__all__: list[str] = []
