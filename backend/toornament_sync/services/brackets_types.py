"""
brackets-model schema: the flat tables brackets-viewer reads.

Optional fields of a ParticipantResult are "absent" when they are not set:
they are left out of model_fields_set and dropped when dumping with
exclude_unset=True, which is how they must be serialized.
"""

from enum import IntEnum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Mapping = Dict[str, int]

# Categories of a mapping bundle, always all present
MAPPING_CATEGORIES = ("tournament", "stages", "groups", "rounds", "matches", "participants")


class Status(IntEnum):
    """Match status, same numbering as brackets-model."""

    LOCKED = 0
    WAITING = 1
    READY = 2
    RUNNING = 3
    COMPLETED = 4
    ARCHIVED = 5


class StageSettings(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    size: Optional[int] = None
    group_count: Optional[int] = None
    grand_final: Optional[str] = None
    skip_first_round: Optional[bool] = None
    consolation_final: Optional[bool] = None
    round_robin_mode: Optional[str] = None  # "simple" | "double"


class Stage(BaseModel):
    id: int
    tournament_id: int
    name: str
    type: str  # "round_robin" | "single_elimination" | "double_elimination"
    number: int
    settings: StageSettings


class ParticipantResult(BaseModel):
    id: Optional[int] = None
    position: Optional[int] = None
    score: Optional[Union[int, float]] = None
    forfeit: Optional[bool] = None
    result: Optional[str] = None


class MatchMetadata(BaseModel):
    original_match_id: str


class Match(BaseModel):
    id: int
    stage_id: int
    group_id: int
    round_id: int
    number: int
    child_count: int = 0
    status: Status
    opponent1: Optional[ParticipantResult] = None
    opponent2: Optional[ParticipantResult] = None
    metadata: Optional[MatchMetadata] = None


class MatchGame(BaseModel):
    id: int
    stage_id: int
    parent_id: int
    number: int
    status: Status
    opponent1: Optional[ParticipantResult] = None
    opponent2: Optional[ParticipantResult] = None


class Participant(BaseModel):
    id: int
    tournament_id: int
    name: str


class Database(BaseModel):
    stage: List[Stage] = Field(default_factory=list)
    match: List[Match] = Field(default_factory=list)
    match_game: List[MatchGame] = Field(default_factory=list)
    participant: List[Participant] = Field(default_factory=list)


class ConvertResult(BaseModel):
    database: Database
    mappings: Dict[str, Mapping]
