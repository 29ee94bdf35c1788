"""Route modules."""

from .admin import router as admin_router
from .auth import router as auth_router
from .books import router as books_router
from .categories import router as categories_router
from .library import router as library_router
from .purchases import router as purchases_router
from .reviews import router as reviews_router
from .user import router as user_router

__all__ = [
    "admin_router",
    "auth_router",
    "books_router",
    "categories_router",
    "library_router",
    "purchases_router",
    "reviews_router",
    "user_router",
]
