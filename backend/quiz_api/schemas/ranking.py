from pydantic import BaseModel, ConfigDict, Field

class RankingEntryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    score: int
    level: str

class ParticipantPageOut(BaseModel):
    data: list[RankingEntryOut] = Field(default_factory=list)
    total: int
    page: int
    total_pages: int = Field(serialization_alias="totalPages")

class ParticipantRenameIn(BaseModel):
    username: str = Field(..., min_length=1, max_length=120)
