"""HTTP controllers for web API endpoints.

All operations are read-only.
"""

from noblocks.web.controllers.balances import router as balances_router
from noblocks.web.controllers.networks import router as networks_router

__all__ = [
    "balances_router",
    "networks_router",
]
