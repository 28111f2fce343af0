"""Bootstrap (composition root) for MARQUEE.

Assembles the application at runtime: wires concrete adapters to
service-layer handlers, composes shared services (message bus, unit of work,
id generator, clock), and reads configuration.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `marquee.adapters`, `marquee.service_layer`,
  `marquee.interfaces`, `marquee.domain`, and `marquee.config`.
- Inner layers must not import `marquee.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap, build_message_bus

__all__ = ["AppContainer", "bootstrap", "build_message_bus"]
