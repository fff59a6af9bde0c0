import uuid
import sqlalchemy as sa

from poemstudio.db.base import Base


class Poem(Base):
    __tablename__ = "poems"

    id = sa.Column(sa.String(64), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Unfiled when null. No cascade: collections are never deleted through the API.
    collection_id = sa.Column(
        sa.String(64),
        sa.ForeignKey("poem_collections.id"),
        nullable=True,
        index=True
    )
    user_id = sa.Column(sa.String(255), nullable=False, index=True)

    title = sa.Column(sa.Text, nullable=True)
    form = sa.Column(sa.Text, nullable=True)  # "haiku", "sonnet", "free-verse", ...
    style = sa.Column(sa.Text, nullable=True)  # "romantic", "humorous", ...
    language = sa.Column(sa.Text, nullable=True)  # e.g. "en", "ta"
    prompt = sa.Column(sa.Text, nullable=True)
    body = sa.Column(sa.Text, nullable=False)
    notes = sa.Column(sa.Text, nullable=True)
    is_favorite = sa.Column(sa.Boolean, nullable=False, server_default=sa.text("false"))

    created_at = sa.Column(sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)
    updated_at = sa.Column(sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)
