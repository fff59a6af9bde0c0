import uuid
import sqlalchemy as sa

from poemstudio.db.base import Base


class Collection(Base):
    __tablename__ = "poem_collections"

    id = sa.Column(sa.String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = sa.Column(sa.String(255), nullable=False, index=True)

    name = sa.Column(sa.Text, nullable=False)  # e.g. "Nature poems"
    description = sa.Column(sa.Text, nullable=True)
    icon = sa.Column(sa.Text, nullable=True)
    is_default = sa.Column(sa.Boolean, nullable=False, server_default=sa.text("false"))

    created_at = sa.Column(sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)
    updated_at = sa.Column(sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)
