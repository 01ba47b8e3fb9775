"""Helpers for describing Jaeger deployments: DNS-safe names, spec merging, labels and version info."""

__version__ = "0.1.0"
__all__ = ["dns", "util", "version"]