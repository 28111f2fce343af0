"""Domain layer for MARQUEE.

Contains business rules: calendar value objects, the week partitioner, the
plan table, and the booking workflow engine. Everything here is pure
computation with no I/O.

Dependency rule: do not import from `marquee.adapters` or `marquee.entrypoints`.
"""
