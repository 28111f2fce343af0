"""MARQUEE test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real database interactions (SQLite files, Alembic migrations).
- contract/     : Behavior every repository implementation must share.
- e2e/          : The ``marquee`` CLI invoked through click's CliRunner.
- functional/   : User stories (database onboarding, help) driven through the CLI.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic; prefer the in-memory adapters over mocks.
- Contract tests parametrize implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
