import datetime as dt
import logging
import uuid
from typing import List

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession

from poemstudio.db.models.collection import Collection
from poemstudio.schemas.collection import CollectionCreate, CollectionUpdate
from poemstudio.services.auth_service import CurrentUser
from poemstudio.services.errors import NotFound

logger = logging.getLogger(__name__)


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class CollectionService:
    @staticmethod
    async def get_owned_collection(db: AsyncSession, collection_id: str, user_id: str) -> Collection:
        """Fetch a collection only if ``user_id`` owns it.

        A missing collection and someone else's collection raise the same
        ``NotFound``, so callers cannot probe for other users' data.
        """
        collection = await db.scalar(
            sa.select(Collection).where(
                Collection.id == collection_id,
                Collection.user_id == user_id
            )
        )

        if collection is None:
            logger.debug("Collection %s not found for user %s", collection_id, user_id)
            raise NotFound("Collection not found.")

        return collection

    @classmethod
    async def create(cls, db: AsyncSession, user: CurrentUser, data: CollectionCreate) -> Collection:
        now = utcnow()
        collection = Collection(
            id=str(uuid.uuid4()),
            user_id=user.id,
            name=data.name,
            description=data.description,
            icon=data.icon,
            is_default=data.is_default,
            created_at=now,
            updated_at=now,
        )

        db.add(collection)
        await db.commit()
        await db.refresh(collection)
        logger.info("Created collection %s for user %s", collection.id, user.id)
        return collection

    @classmethod
    async def update(
        cls,
        db: AsyncSession,
        user: CurrentUser,
        collection_id: str,
        data: CollectionUpdate,
    ) -> Collection:
        collection = await cls.get_owned_collection(db, collection_id, user.id)

        changes = data.patch()
        for field, value in changes.items():
            setattr(collection, field, value)
        collection.updated_at = utcnow()

        await db.commit()
        await db.refresh(collection)
        logger.info("Updated collection %s (%s)", collection.id, ", ".join(sorted(changes)))
        return collection

    @classmethod
    async def list(cls, db: AsyncSession, user: CurrentUser) -> List[Collection]:
        result = await db.scalars(
            sa.select(Collection)
            .where(Collection.user_id == user.id)
            .order_by(Collection.created_at, Collection.id)
        )
        return list(result.all())
