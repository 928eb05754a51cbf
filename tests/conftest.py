"""Global pytest fixtures for tablekit."""

pytest_plugins = [
    "tests.fixtures.tables",
]
