"""
Toornament data as received from the Toornament API.

Only the fields the converter reads are declared; anything else in the
payload is ignored. These models parse, they do not check that the data is
consistent (e.g. that every stage_id names a known stage).
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

MatchStatus = Literal["pending", "running", "completed"]


class ToornamentModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class StageSettings(ToornamentModel):
    size: Optional[int] = None
    nb_groups: Optional[int] = None
    pairing_method: Optional[str] = None  # "manual" | "standard" | "double_standard"
    grand_final: Optional[str] = None  # "none" | "simple" | "double"
    third_decider: Optional[bool] = None
    skip_round1: Optional[bool] = None


class Stage(ToornamentModel):
    id: str
    number: int
    name: str
    type: str  # "pools" | "single_elimination" | "double_elimination"
    settings: StageSettings = StageSettings()


class Participant(ToornamentModel):
    id: str
    name: str


class Opponent(ToornamentModel):
    number: Optional[int] = None
    position: Optional[int] = None
    participant: Optional[Participant] = None
    result: Optional[str] = None  # "win" | "draw" | "loss"
    forfeit: Optional[bool] = False
    score: Optional[Union[int, float]] = None
    source_node_id: Optional[str] = None


class Match(ToornamentModel):
    id: str
    stage_id: str
    group_id: str
    round_id: str
    number: int
    type: Optional[str] = None
    status: MatchStatus
    opponents: Optional[List[Opponent]] = None

    @field_validator("opponents")
    @classmethod
    def validate_opponents(cls, v):
        if v and len(v) != 2:
            raise ValueError("a match has either no opponents or exactly two")
        return v
