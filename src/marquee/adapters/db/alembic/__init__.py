"""Alembic migration scripts for MARQUEE (located via `config.build_alembic_config`)."""
