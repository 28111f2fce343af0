"""Adapters for MARQUEE.

Concrete implementations of the ports in `marquee.interfaces`: SQLAlchemy
tables, repositories and unit of work, in-memory repositories for tests, and
identifier generators.

Dependency rule: may import `marquee.domain` and `marquee.interfaces`, never
`marquee.service_layer` or `marquee.entrypoints`.
"""
