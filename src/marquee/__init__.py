"""MARQUEE

Residency scheduling and booking-workflow engine for an artist/venue booking
platform. Venues request artist formats, requests move through an approval
workflow gated by subscription-plan quotas, and confirmed bookings become
residencies split into calendar weeks.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
