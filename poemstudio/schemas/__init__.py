from .base import ApiModel
from .collection import CollectionCreate, CollectionUpdate, CollectionRead
from .poem import PoemCreate, PoemUpdate, PoemRead, PoemFilter

__all__ = [
    "ApiModel",
    "CollectionCreate",
    "CollectionUpdate",
    "CollectionRead",
    "PoemCreate",
    "PoemUpdate",
    "PoemRead",
    "PoemFilter",
]
