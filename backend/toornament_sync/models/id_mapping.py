from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class ToornamentIdMapping(SQLModel, table=True):
    """Toornament string id -> surrogate id, per destination tournament and category.

    Kept so that later syncs of the same tournament can be translated into
    the same key space.
    """

    tournament_id: int = Field(primary_key=True)
    category: str = Field(primary_key=True)  # tournament | stages | groups | rounds | matches | participants
    external_id: str = Field(primary_key=True)
    surrogate_id: int
    imported_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
