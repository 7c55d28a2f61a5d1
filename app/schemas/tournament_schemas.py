from pydantic import BaseModel, Field
from datetime import datetime

from app.models.tournament import TournamentStatus

class TournamentBase(BaseModel):
    name: str
    start_date: datetime

class TournamentCreate(TournamentBase):
    # Blank names are rejected by tournament_service, not here
    pass

class TournamentRead(TournamentBase):
    id: int
    status: TournamentStatus
    participant_count: int = Field(0, description="Number of enrolled participants")

    class Config:
        from_attributes = True
