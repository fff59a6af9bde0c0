import logging
import uuid
from typing import List

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession

from poemstudio.db.models.poem import Poem
from poemstudio.schemas.poem import PoemCreate, PoemFilter, PoemUpdate
from poemstudio.services.auth_service import CurrentUser
from poemstudio.services.collection_service import CollectionService, utcnow
from poemstudio.services.errors import NotFound

logger = logging.getLogger(__name__)


class PoemService:
    @staticmethod
    async def get_owned_poem(db: AsyncSession, poem_id: str, user_id: str) -> Poem:
        poem = await db.scalar(
            sa.select(Poem).where(Poem.id == poem_id, Poem.user_id == user_id)
        )

        if poem is None:
            raise NotFound("Poem not found.")

        return poem

    @classmethod
    async def create(cls, db: AsyncSession, user: CurrentUser, data: PoemCreate) -> Poem:
        if data.collection_id is not None:
            await CollectionService.get_owned_collection(db, data.collection_id, user.id)

        now = utcnow()
        poem = Poem(
            id=str(uuid.uuid4()),
            collection_id=data.collection_id,
            user_id=user.id,
            title=data.title,
            form=data.form,
            style=data.style,
            language=data.language,
            prompt=data.prompt,
            body=data.body,
            notes=data.notes,
            is_favorite=data.is_favorite,
            created_at=now,
            updated_at=now,
        )

        db.add(poem)
        await db.commit()
        await db.refresh(poem)
        logger.info("Created poem %s for user %s", poem.id, user.id)
        return poem

    @classmethod
    async def update(cls, db: AsyncSession, user: CurrentUser, poem_id: str, data: PoemUpdate) -> Poem:
        poem = await cls.get_owned_poem(db, poem_id, user.id)

        changes = data.patch()
        if changes.get("collection_id") is not None:
            await CollectionService.get_owned_collection(db, changes["collection_id"], user.id)

        for field, value in changes.items():
            setattr(poem, field, value)
        poem.updated_at = utcnow()

        await db.commit()
        await db.refresh(poem)
        logger.info("Updated poem %s (%s)", poem.id, ", ".join(sorted(changes)))
        return poem

    @classmethod
    async def delete(cls, db: AsyncSession, user: CurrentUser, poem_id: str) -> None:
        # Ownership is part of the WHERE clause, so a foreign poem matches zero rows too.
        result = await db.execute(
            sa.delete(Poem).where(Poem.id == poem_id, Poem.user_id == user.id)
        )

        if result.rowcount == 0:
            await db.rollback()
            raise NotFound("Poem not found.")

        await db.commit()
        logger.info("Deleted poem %s for user %s", poem_id, user.id)

    @classmethod
    async def list(cls, db: AsyncSession, user: CurrentUser, filters: PoemFilter) -> List[Poem]:
        stmt = sa.select(Poem).where(Poem.user_id == user.id)

        if filters.collection_id is not None:
            await CollectionService.get_owned_collection(db, filters.collection_id, user.id)
            stmt = stmt.where(Poem.collection_id == filters.collection_id)

        if filters.favorites_only:
            stmt = stmt.where(Poem.is_favorite.is_(True))

        result = await db.scalars(stmt.order_by(Poem.created_at, Poem.id))
        return list(result.all())
