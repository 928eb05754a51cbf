"""Unit tests.

One test module per ``tablekit`` module. Keep assertions on observable
behavior (returned values, identities, raised errors, log records).
"""
