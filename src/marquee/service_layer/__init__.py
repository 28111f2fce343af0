"""Service layer for MARQUEE.

Implements application use-cases: command handlers, orchestration, and
transaction boundaries. Loads snapshots through the ports, runs the pure
workflow engine and week partitioner, and persists the outcome atomically.

Dependency rule: may import `marquee.domain` and `marquee.interfaces`, but not
`marquee.adapters` or `marquee.entrypoints`.
"""
