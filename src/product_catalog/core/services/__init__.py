from .database import DbManageService, DbSessionService
from .product_service import ProductService

__all__ = ["DbManageService", "DbSessionService", "ProductService"]
