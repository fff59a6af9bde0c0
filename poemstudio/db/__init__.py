from .base import Base
from .models import collection, poem

__all__ = ["Base", "collection", "poem"]
