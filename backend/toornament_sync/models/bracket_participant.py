from sqlmodel import Field, SQLModel


class BracketParticipant(SQLModel, table=True):
    tournament_id: int = Field(primary_key=True)
    id: int = Field(primary_key=True)
    name: str
