"""Entry points for MARQUEE (command-line interface).

Dependency rule: entry points talk to `marquee.bootstrap`, `marquee.config`
and the pure domain; they never reach into adapters beyond the database
engine used for schema commands.
"""
