# Force SQLModel table registration at test discovery time
# This ensures all models are registered before any test database creation
from toornament_sync.models.bracket_match import BracketMatch  # noqa: F401
from toornament_sync.models.bracket_participant import BracketParticipant  # noqa: F401
from toornament_sync.models.bracket_stage import BracketStage  # noqa: F401
from toornament_sync.models.id_mapping import ToornamentIdMapping  # noqa: F401
