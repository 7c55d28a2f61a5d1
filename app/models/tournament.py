from enum import Enum

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from app.core.database import Base

class TournamentStatus(str, Enum):
    DRAFT = "Draft"
    STARTED = "Started"
    FINISHED = "Finished"

class Tournament(Base):
    __tablename__ = "tournaments"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    start_date = Column(DateTime, nullable=False)
    status = Column(String, nullable=False, default=TournamentStatus.DRAFT.value)

    bracket = relationship(
        "Bracket",
        back_populates="tournament",
        uselist=False,
        cascade="all, delete-orphan",
    )
    participants = relationship(
        "Participant",
        back_populates="tournament",
        cascade="all, delete-orphan",
        order_by="Participant.id",
    )

    @property
    def participant_count(self) -> int:
        return len(self.participants)
