"""Outbound ports for MARQUEE.

Abstract contracts the service layer depends on: repositories for booking
requests, venue accounts and residencies, the unit of work that bundles them
into one transaction, and identifier generation. Adapters implement them.
"""
