"""Toornament import endpoints.

Stateless conversion, convert-and-store import, and read-back of the stored
brackets-model tables for the display layer.
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from toornament_sync.database import get_session
from toornament_sync.services import brackets_types as brackets
from toornament_sync.services import toornament_types as toornament
from toornament_sync.services.converter import convert_data
from toornament_sync.services.errors import ConversionError
from toornament_sync.services.storage import load_database, load_mappings, store_conversion

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Request / Response models
# ---------------------------------------------------------------------------


class ConvertRequest(BaseModel):
    tournament_id: int
    stages: List[toornament.Stage] = []
    matches: List[toornament.Match] = []


class ImportRequest(BaseModel):
    stages: List[toornament.Stage] = []
    matches: List[toornament.Match] = []


class ImportResponse(BaseModel):
    tournament_id: int
    stages: int
    matches: int
    participants: int
    replaced: int
    mappings: Dict[str, brackets.Mapping]


def _convert_or_422(tournament_id: int, stages: List[toornament.Stage], matches: List[toornament.Match]):
    try:
        return convert_data(tournament_id, stages, matches)
    except ConversionError as e:
        logger.warning("Toornament conversion failed for tournament %s: %s", tournament_id, e)
        raise HTTPException(422, str(e))


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.post(
    "/toornament/convert",
    response_model=brackets.ConvertResult,
    response_model_exclude_unset=True,
)
def convert_toornament(body: ConvertRequest):
    """Convert Toornament stages and matches without storing anything."""
    return _convert_or_422(body.tournament_id, body.stages, body.matches)


@router.post("/tournaments/{tournament_id}/toornament/import", response_model=ImportResponse)
def import_toornament(
    tournament_id: int,
    body: ImportRequest,
    session: Session = Depends(get_session),
):
    """
    Convert Toornament data and store it for a tournament.

    Replaces anything previously imported for the tournament. Nothing is
    stored when the conversion fails.
    """
    result = _convert_or_422(tournament_id, body.stages, body.matches)
    try:
        counts = store_conversion(session, tournament_id, result)
    except IntegrityError as e:
        session.rollback()
        logger.warning("Toornament import failed for tournament %s: %s", tournament_id, e.orig)
        raise HTTPException(422, "Duplicate Toornament stage or match ids in import data")

    return ImportResponse(
        tournament_id=tournament_id,
        stages=counts["stages"],
        matches=counts["matches"],
        participants=counts["participants"],
        replaced=counts["replaced"],
        mappings=result.mappings,
    )


@router.get(
    "/tournaments/{tournament_id}/brackets",
    response_model=brackets.Database,
    response_model_exclude_unset=True,
)
def get_brackets(tournament_id: int, session: Session = Depends(get_session)):
    """Stored stage / match / match_game / participant tables of a tournament."""
    database = load_database(session, tournament_id)
    if database is None:
        raise HTTPException(404, f"No Toornament data imported for tournament {tournament_id}")
    return database


@router.get(
    "/tournaments/{tournament_id}/toornament/mappings",
    response_model=Dict[str, brackets.Mapping],
)
def get_mappings(tournament_id: int, session: Session = Depends(get_session)):
    """Toornament id -> surrogate id mappings stored by the last import."""
    mappings = load_mappings(session, tournament_id)
    if mappings is None:
        raise HTTPException(404, f"No Toornament data imported for tournament {tournament_id}")
    return mappings
