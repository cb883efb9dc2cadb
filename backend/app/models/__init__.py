from app.models.lookup import Brand, Category
from app.models.user import User

__all__ = ["Brand", "Category", "User"]
