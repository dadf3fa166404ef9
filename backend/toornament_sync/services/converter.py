"""
Toornament -> brackets-model conversion.

Turns Toornament stages and matches (string ids, opponents pointing to the
match they come from) into flat brackets-model tables keyed by small
sequential integers.

Guarantees:
    - Surrogate ids start at 0 per category and follow first-seen order
    - Same input in the same order -> same ids (no state outside one call)
    - Each participant appears once, first occurrence wins
    - All-or-nothing: any ConversionError aborts the whole conversion

Matches are processed in input order and a source match must already be
converted when a later match references it. Input where a match comes
before its source match is rejected with SourceMatchNotFoundError.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel

from toornament_sync.services import brackets_types as brackets
from toornament_sync.services import toornament_types as toornament
from toornament_sync.services.errors import SourceMatchNotFoundError
from toornament_sync.services.id_registry import IdRegistry
from toornament_sync.services.translators import (
    TOURNAMENT_ID,
    convert_match_status,
    convert_participant,
    convert_participant_result,
    convert_stage,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse(model: Type[ModelT], item: Union[ModelT, Dict[str, Any]]) -> ModelT:
    if isinstance(item, model):
        return item
    return model.model_validate(item)


class _ConversionRun:
    """State of a single conversion call: one registry per category plus the tables built so far."""

    def __init__(self):
        self.stage_ids = IdRegistry()
        self.group_ids = IdRegistry()
        self.round_ids = IdRegistry()
        self.match_ids = IdRegistry()
        self.participant_ids = IdRegistry()

        self.stages: List[brackets.Stage] = []
        self.matches: List[brackets.Match] = []
        # Converted matches by surrogate id, for source lookups
        self.matches_by_id: Dict[int, brackets.Match] = {}
        # Insertion-ordered, keyed by surrogate participant id
        self.participants: Dict[int, brackets.Participant] = {}

    def add_stage(self, stage: toornament.Stage) -> None:
        self.stages.append(convert_stage(self.stage_ids(stage.id), stage))

    def resolve_participant(self, opponent: toornament.Opponent) -> Optional[int]:
        """Surrogate id of the opponent's participant (None for a bye / TBD); records new participants."""
        if opponent.participant is None:
            return None

        participant_id = self.participant_ids(opponent.participant.id)
        if participant_id not in self.participants:
            self.participants[participant_id] = convert_participant(participant_id, opponent.participant)
        return participant_id

    def find_source_position(self, opponent: toornament.Opponent, match_id: str) -> Optional[int]:
        """Number of the match the opponent comes from, or None when it has no source."""
        if not opponent.source_node_id:
            return None

        source_match = self.matches_by_id.get(self.match_ids(opponent.source_node_id))
        if source_match is None:
            raise SourceMatchNotFoundError(opponent.source_node_id, match_id)
        return source_match.number

    def add_match(self, match: toornament.Match) -> bool:
        """Convert one match. Returns False when the match was skipped."""
        if not match.opponents:
            logger.debug("Skipping match %s: no opponents", match.id)
            return False

        opponent1, opponent2 = match.opponents[0], match.opponents[1]
        participant1_id = self.resolve_participant(opponent1)
        participant2_id = self.resolve_participant(opponent2)

        converted = brackets.Match(
            id=self.match_ids(match.id),
            stage_id=self.stage_ids(match.stage_id),
            group_id=self.group_ids(match.group_id),
            round_id=self.round_ids(match.round_id),
            number=match.number,
            child_count=0,
            status=convert_match_status(match.status),
            opponent1=convert_participant_result(
                participant1_id, self.find_source_position(opponent1, match.id), opponent1
            ),
            opponent2=convert_participant_result(
                participant2_id, self.find_source_position(opponent2, match.id), opponent2
            ),
            metadata=brackets.MatchMetadata(original_match_id=match.id),
        )

        self.matches.append(converted)
        # First converted match wins if an external id repeats
        self.matches_by_id.setdefault(converted.id, converted)
        return True

    def mappings(self, tournament_id: int) -> Dict[str, brackets.Mapping]:
        return {
            "tournament": {str(tournament_id): TOURNAMENT_ID},
            "stages": self.stage_ids.mapping(),
            "groups": self.group_ids.mapping(),
            "rounds": self.round_ids.mapping(),
            "matches": self.match_ids.mapping(),
            "participants": self.participant_ids.mapping(),
        }


def convert_data(
    tournament_id: int,
    stages: Sequence[Union[toornament.Stage, Dict[str, Any]]],
    matches: Sequence[Union[toornament.Match, Dict[str, Any]]],
) -> brackets.ConvertResult:
    """
    Convert Toornament stages and matches to a brackets-model database.

    Args:
        tournament_id: ID of the destination tournament (only used in the mappings)
        stages: Toornament stages, models or raw dicts
        matches: Toornament matches, models or raw dicts, sources before dependents

    Returns:
        ConvertResult with the database (stage, match, match_game, participant)
        and the string -> integer mappings of every category.

    Raises:
        UnsupportedStageTypeError, UnsupportedMatchStatusError, SourceMatchNotFoundError
    """
    run = _ConversionRun()

    for stage in stages:
        run.add_stage(_parse(toornament.Stage, stage))

    skipped = 0
    for match in matches:
        if not run.add_match(_parse(toornament.Match, match)):
            skipped += 1

    database = brackets.Database(
        stage=run.stages,
        match=run.matches,
        match_game=[],
        participant=list(run.participants.values()),
    )

    logger.info(
        "Converted tournament %s: %d stages, %d matches (%d skipped), %d participants",
        tournament_id,
        len(database.stage),
        len(database.match),
        skipped,
        len(database.participant),
    )

    return brackets.ConvertResult(database=database, mappings=run.mappings(tournament_id))
