from toornament_sync.models.bracket_match import BracketMatch
from toornament_sync.models.bracket_participant import BracketParticipant
from toornament_sync.models.bracket_stage import BracketStage
from toornament_sync.models.id_mapping import ToornamentIdMapping

__all__ = [
    "BracketStage",
    "BracketMatch",
    "BracketParticipant",
    "ToornamentIdMapping",
]
