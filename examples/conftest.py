"""Fixtures for the example applications under ``examples/``.

Each example directory holds an ``app.py`` that builds a module-level
``app`` and a ``test_app.py`` that exercises it. ``example_app`` executes
the sibling ``app.py`` afresh for every test. An onion App freezes on its
first request, so tests cannot share one instance.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    """A newly built, still unfrozen App from the example under test."""
    app_file = Path(request.path).with_name("app.py")
    loaded = importlib.util.spec_from_file_location(f"onion_example_{app_file.parent.name}", app_file)
    assert loaded is not None and loaded.loader is not None
    module = importlib.util.module_from_spec(loaded)
    loaded.loader.exec_module(module)
    return module.app
