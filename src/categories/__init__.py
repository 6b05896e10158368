from src.categories.models import Category
from src.categories.schemas import (
    CategoryBase,
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
)

__all__ = [
    # Models
    "Category",
    # Schemas
    "CategoryBase",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
]
