"""HTTP routers.

Routers:
    investments_router: /investments holding and portfolio endpoints
    system_router: root and health endpoints
"""

from mintlite.presentation.routers.investments import router as investments_router
from mintlite.presentation.routers.system import system_router

__all__ = ["investments_router", "system_router"]
