# motioncore/core/errors.py
"""
Configuration errors.

Raised once, when a window/sequence/spec object is built. Per-frame
evaluation never raises for out-of-range frames.
"""


class ConfigurationError(ValueError):
    """Malformed animation configuration (zero items, bad duration, ...)."""
