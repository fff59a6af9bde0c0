from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from poemstudio.db.session import get_db
from poemstudio.schemas.poem import PoemCreate, PoemFilter, PoemRead, PoemUpdate
from poemstudio.services.auth_service import AuthService, CurrentUser
from poemstudio.services.poem_service import PoemService

router = APIRouter(prefix="/poems", tags=["poems"])


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_poem(
    poem_data: PoemCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(AuthService.get_current_user),
):
    poem = await PoemService.create(db, user, poem_data)
    return {"success": True, "data": {"poem": PoemRead.model_validate(poem)}}


@router.patch("/{poem_id}", status_code=status.HTTP_200_OK)
async def update_poem(
    poem_id: str,
    poem_update: PoemUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(AuthService.get_current_user),
):
    poem = await PoemService.update(db, user, poem_id, poem_update)
    return {"success": True, "data": {"poem": PoemRead.model_validate(poem)}}


@router.delete("/{poem_id}", status_code=status.HTTP_200_OK)
async def delete_poem(
    poem_id: str,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(AuthService.get_current_user),
):
    await PoemService.delete(db, user, poem_id)
    return {"success": True}


@router.get("/", status_code=status.HTTP_200_OK)
async def list_poems(
    collection_id: Optional[str] = Query(None, alias="collectionId", min_length=1),
    favorites_only: bool = Query(False, alias="favoritesOnly"),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(AuthService.get_current_user),
):
    filters = PoemFilter(collection_id=collection_id, favorites_only=favorites_only)
    poems = await PoemService.list(db, user, filters)
    items = [PoemRead.model_validate(p) for p in poems]
    return {"success": True, "data": {"items": items, "total": len(items)}}
