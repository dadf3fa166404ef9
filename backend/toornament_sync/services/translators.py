"""
Toornament -> brackets-model record translators.

Pure functions: no registry access, no shared state. Identifiers are
resolved by the caller and passed in as surrogate ids.
"""

from typing import Any, Dict, Optional

from toornament_sync.services import brackets_types as brackets
from toornament_sync.services import toornament_types as toornament
from toornament_sync.services.errors import UnsupportedMatchStatusError, UnsupportedStageTypeError

# Conversion is always scoped to a single destination tournament
TOURNAMENT_ID = 0

STAGE_TYPES: Dict[str, str] = {
    "pools": "round_robin",
    "single_elimination": "single_elimination",
    "double_elimination": "double_elimination",
}

ROUND_ROBIN_MODES: Dict[str, str] = {
    "standard": "simple",
    "double_standard": "double",
}

MATCH_STATUSES: Dict[str, brackets.Status] = {
    "pending": brackets.Status.WAITING,
    "running": brackets.Status.RUNNING,
    "completed": brackets.Status.COMPLETED,
}


def convert_stage_type(stage_type: str) -> str:
    """Translate a Toornament stage type. Raises UnsupportedStageTypeError for anything else."""
    try:
        return STAGE_TYPES[stage_type]
    except KeyError:
        raise UnsupportedStageTypeError(stage_type) from None


def convert_round_robin_mode(pairing_method: Optional[str]) -> Optional[str]:
    """Translate a pairing method; "manual" and unknown methods have no round-robin mode."""
    return ROUND_ROBIN_MODES.get(pairing_method) if pairing_method else None


def convert_stage_settings(settings: toornament.StageSettings) -> brackets.StageSettings:
    fields: Dict[str, Any] = {
        "size": settings.size,
        "group_count": settings.nb_groups,
        "grand_final": settings.grand_final,
        "skip_first_round": settings.skip_round1,
        "consolation_final": settings.third_decider,
    }
    round_robin_mode = convert_round_robin_mode(settings.pairing_method)
    if round_robin_mode is not None:
        fields["round_robin_mode"] = round_robin_mode
    return brackets.StageSettings(**fields)


def convert_stage(stage_id: int, stage: toornament.Stage) -> brackets.Stage:
    return brackets.Stage(
        id=stage_id,
        tournament_id=TOURNAMENT_ID,
        name=stage.name,
        type=convert_stage_type(stage.type),
        number=stage.number,
        settings=convert_stage_settings(stage.settings),
    )


def convert_match_status(status: str) -> brackets.Status:
    """pending -> Waiting, running -> Running, completed -> Completed."""
    try:
        return MATCH_STATUSES[status]
    except KeyError:
        raise UnsupportedMatchStatusError(status) from None


def convert_participant(participant_id: int, participant: toornament.Participant) -> brackets.Participant:
    return brackets.Participant(
        id=participant_id,
        tournament_id=TOURNAMENT_ID,
        name=participant.name,
    )


def convert_participant_result(
    participant_id: Optional[int],
    position: Optional[int],
    opponent: toornament.Opponent,
) -> brackets.ParticipantResult:
    """
    Build the opponent result of a match.

    The participant id is always set, even when null (bye or TBD). The other
    fields are only set when there is data: a null score is absent rather
    than 0, and a false forfeit or empty result is absent rather than stored.
    """
    fields: Dict[str, Any] = {"id": participant_id}
    if position is not None:
        fields["position"] = position
    if opponent.score is not None:
        fields["score"] = opponent.score
    if opponent.forfeit:
        fields["forfeit"] = opponent.forfeit
    if opponent.result:
        fields["result"] = opponent.result
    return brackets.ParticipantResult(**fields)
