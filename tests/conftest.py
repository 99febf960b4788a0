"""Global pytest fixtures for SHELFMARK."""

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]
