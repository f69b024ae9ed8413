"""Test configuration: shared fixtures live in ``tests.fixtures``."""

pytest_plugins = ["tests.fixtures"]
