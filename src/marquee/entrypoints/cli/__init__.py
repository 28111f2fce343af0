"""The ``marquee`` command-line interface."""
