"""tablekit test suite.

Folder taxonomy
- unit/      : Fast checks of a single module, plus hypothesis properties.
- fixtures/  : Shared pytest fixtures (no tests here).

General guidance
- Everything is in-memory; tests must stay fast and deterministic.
- Property-based tests use @pytest.mark.property.
"""
