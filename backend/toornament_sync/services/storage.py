"""
Persist converted brackets-model data per destination tournament.

A stored tournament is always the result of exactly one conversion:
store_conversion replaces whatever was imported before for that tournament.
"""

import logging
from typing import Dict, List, Optional

from sqlmodel import Session, select

from toornament_sync.models.bracket_match import BracketMatch
from toornament_sync.models.bracket_participant import BracketParticipant
from toornament_sync.models.bracket_stage import BracketStage
from toornament_sync.models.id_mapping import ToornamentIdMapping
from toornament_sync.services import brackets_types as brackets

logger = logging.getLogger(__name__)


def _result_to_json(result: Optional[brackets.ParticipantResult]) -> Optional[Dict]:
    if result is None:
        return None
    return result.model_dump(exclude_unset=True)


def _result_from_json(data: Optional[Dict]) -> Optional[brackets.ParticipantResult]:
    if data is None:
        return None
    return brackets.ParticipantResult(**data)


def delete_tournament_data(session: Session, tournament_id: int) -> int:
    """Delete every stored row of a tournament (no commit). Returns the number of rows deleted."""
    deleted = 0
    for model in (BracketMatch, BracketParticipant, BracketStage, ToornamentIdMapping):
        rows = session.exec(select(model).where(model.tournament_id == tournament_id)).all()
        for row in rows:
            session.delete(row)
        deleted += len(rows)
    session.flush()
    return deleted


def store_conversion(session: Session, tournament_id: int, result: brackets.ConvertResult) -> Dict[str, int]:
    """
    Replace the stored data of a tournament with a conversion result.

    Returns:
        Dict with row counts: stages, matches, participants, mappings, replaced
    """
    replaced = delete_tournament_data(session, tournament_id)
    db = result.database

    for stage in db.stage:
        session.add(
            BracketStage(
                tournament_id=tournament_id,
                id=stage.id,
                name=stage.name,
                type=stage.type,
                number=stage.number,
                settings=stage.settings.model_dump(exclude_unset=True),
            )
        )

    for match in db.match:
        session.add(
            BracketMatch(
                tournament_id=tournament_id,
                id=match.id,
                stage_id=match.stage_id,
                group_id=match.group_id,
                round_id=match.round_id,
                number=match.number,
                child_count=match.child_count,
                status=int(match.status),
                opponent1=_result_to_json(match.opponent1),
                opponent2=_result_to_json(match.opponent2),
                original_match_id=match.metadata.original_match_id if match.metadata else None,
            )
        )

    for participant in db.participant:
        session.add(BracketParticipant(tournament_id=tournament_id, id=participant.id, name=participant.name))

    mapping_count = 0
    for category, mapping in result.mappings.items():
        for external_id, surrogate_id in mapping.items():
            session.add(
                ToornamentIdMapping(
                    tournament_id=tournament_id,
                    category=category,
                    external_id=external_id,
                    surrogate_id=surrogate_id,
                )
            )
            mapping_count += 1

    session.commit()

    counts = {
        "stages": len(db.stage),
        "matches": len(db.match),
        "participants": len(db.participant),
        "mappings": mapping_count,
        "replaced": replaced,
    }
    logger.info("Stored conversion for tournament %d: %s", tournament_id, counts)
    return counts


def load_mappings(session: Session, tournament_id: int) -> Optional[Dict[str, brackets.Mapping]]:
    """Stored mapping bundle of a tournament, or None if it was never imported."""
    rows = session.exec(
        select(ToornamentIdMapping)
        .where(ToornamentIdMapping.tournament_id == tournament_id)
        .order_by(ToornamentIdMapping.category, ToornamentIdMapping.surrogate_id)
    ).all()
    if not rows:
        return None

    mappings: Dict[str, brackets.Mapping] = {category: {} for category in brackets.MAPPING_CATEGORIES}
    for row in rows:
        mappings.setdefault(row.category, {})[row.external_id] = row.surrogate_id
    return mappings


def load_database(session: Session, tournament_id: int) -> Optional[brackets.Database]:
    """Stored brackets-model tables of a tournament, or None if it was never imported."""
    imported = session.exec(
        select(ToornamentIdMapping).where(ToornamentIdMapping.tournament_id == tournament_id)
    ).first()
    if imported is None:
        return None

    stage_rows = session.exec(
        select(BracketStage).where(BracketStage.tournament_id == tournament_id).order_by(BracketStage.id)
    ).all()
    match_rows = session.exec(
        select(BracketMatch).where(BracketMatch.tournament_id == tournament_id).order_by(BracketMatch.id)
    ).all()
    participant_rows = session.exec(
        select(BracketParticipant)
        .where(BracketParticipant.tournament_id == tournament_id)
        .order_by(BracketParticipant.id)
    ).all()

    stages: List[brackets.Stage] = [
        brackets.Stage(
            id=s.id,
            tournament_id=0,
            name=s.name,
            type=s.type,
            number=s.number,
            settings=brackets.StageSettings(**s.settings),
        )
        for s in stage_rows
    ]
    matches: List[brackets.Match] = [
        brackets.Match(
            id=m.id,
            stage_id=m.stage_id,
            group_id=m.group_id,
            round_id=m.round_id,
            number=m.number,
            child_count=m.child_count,
            status=brackets.Status(m.status),
            opponent1=_result_from_json(m.opponent1),
            opponent2=_result_from_json(m.opponent2),
            metadata=brackets.MatchMetadata(original_match_id=m.original_match_id)
            if m.original_match_id is not None
            else None,
        )
        for m in match_rows
    ]
    participants = [brackets.Participant(id=p.id, tournament_id=0, name=p.name) for p in participant_rows]

    return brackets.Database(stage=stages, match=matches, match_game=[], participant=participants)
