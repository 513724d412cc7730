"""Onion exception hierarchy.

Routing misses are never exceptions: an unmatched request is answered by
the not-found handler. These types cover mistakes made while configuring
an app.
"""


class OnionError(Exception):
    """Base for all onion-specific errors."""


class ConfigurationError(OnionError):
    """Raised when a route, middleware, or handler registration is invalid.

    Raised eagerly at registration time so a broken app fails before it
    starts serving requests.
    """
