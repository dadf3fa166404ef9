from typing import Any, Dict

from sqlalchemy import JSON
from sqlmodel import Column, Field, SQLModel


class BracketStage(SQLModel, table=True):
    # Destination tournament + surrogate stage id from the conversion
    tournament_id: int = Field(primary_key=True)
    id: int = Field(primary_key=True)

    name: str
    type: str  # "round_robin" | "single_elimination" | "double_elimination"
    number: int
    settings: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
