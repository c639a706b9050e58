"""
Hello Service Package.

A minimal HTTP service exposing a health check and a greeting message,
intended to run as a Kubernetes workload.
"""

__version__ = "1.0.0"
__description__ = "Health check and greeting HTTP service"

__all__ = [
    "__version__",
]
