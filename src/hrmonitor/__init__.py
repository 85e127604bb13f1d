"""Heart rate monitor client.

Drives a camera permission probe and a fetch from the measurement service,
and exposes the outcome to a desktop front end.
"""

__all__ = [
    "app",
    "capture",
    "client",
    "config",
    "demo_server",
    "errors",
    "models",
    "permission",
    "view",
    "workflow",
]

__version__ = "0.1.0"
