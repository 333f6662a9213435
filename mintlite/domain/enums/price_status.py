"""Price freshness status.

A holding's price is either CURRENT (refreshed within the active refresh
window) or STALE (older than the window, or never refreshed). The refresh
workflow is the only transition from STALE to CURRENT.
"""

from enum import Enum


class PriceStatus(str, Enum):
    """Freshness of a holding's current price."""

    STALE = "stale"
    CURRENT = "current"
