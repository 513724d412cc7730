"""Application configuration.

AppConfig is a frozen dataclass: immutable after creation, passed
explicitly to ``App`` rather than read from globals.
"""

from dataclasses import dataclass

DEFAULT_NOT_FOUND_BODY = "404 page not found\n"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=3333, debug=True)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    workers: int = 1
    log_level: str = "info"

    # Body written by the default not-found handler
    not_found_body: str = DEFAULT_NOT_FOUND_BODY
