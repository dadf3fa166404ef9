from typing import Any, Dict, Optional

from sqlalchemy import JSON
from sqlmodel import Column, Field, SQLModel


class BracketMatch(SQLModel, table=True):
    tournament_id: int = Field(primary_key=True)
    id: int = Field(primary_key=True)

    stage_id: int = Field(index=True)
    group_id: int
    round_id: int
    number: int
    child_count: int = Field(default=0)
    status: int  # brackets-model Status (0=Locked .. 5=Archived)

    # ParticipantResult dicts; absent fields are not stored (null score is not 0)
    opponent1: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))
    opponent2: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))

    # Toornament match id, for tracing a row back to the source data
    original_match_id: Optional[str] = Field(default=None, index=True)
