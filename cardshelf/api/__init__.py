from cardshelf.api.grouping import router as grouping_router
from cardshelf.api.health import router as health_router

__all__ = [
    "grouping_router",
    "health_router",
]
