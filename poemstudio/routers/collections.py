from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from poemstudio.db.session import get_db
from poemstudio.schemas.collection import CollectionCreate, CollectionRead, CollectionUpdate
from poemstudio.services.auth_service import AuthService, CurrentUser
from poemstudio.services.collection_service import CollectionService

router = APIRouter(prefix="/collections", tags=["collections"])


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_collection(
    collection_data: CollectionCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(AuthService.get_current_user),
):
    collection = await CollectionService.create(db, user, collection_data)
    return {"success": True, "data": {"collection": CollectionRead.model_validate(collection)}}


@router.patch("/{collection_id}", status_code=status.HTTP_200_OK)
async def update_collection(
    collection_id: str,
    collection_update: CollectionUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(AuthService.get_current_user),
):
    collection = await CollectionService.update(db, user, collection_id, collection_update)
    return {"success": True, "data": {"collection": CollectionRead.model_validate(collection)}}


@router.get("/", status_code=status.HTTP_200_OK)
async def list_collections(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(AuthService.get_current_user),
):
    collections = await CollectionService.list(db, user)
    items = [CollectionRead.model_validate(c) for c in collections]
    return {"success": True, "data": {"items": items, "total": len(items)}}
