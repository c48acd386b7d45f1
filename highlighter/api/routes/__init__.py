from .catalog import router as catalog_router
from .highlights import router as highlights_router
from .rules import router as rules_router
from .boards import router as boards_router

__all__ = [
    "catalog_router",
    "highlights_router",
    "rules_router",
    "boards_router"
]
