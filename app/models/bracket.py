from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base

class Bracket(Base):
    __tablename__ = "brackets"

    id = Column(Integer, primary_key=True, index=True)
    tournament_id = Column(Integer, ForeignKey("tournaments.id", ondelete="CASCADE"), unique=True, nullable=False)

    tournament = relationship("Tournament", back_populates="bracket")
    matches = relationship(
        "Match",
        back_populates="bracket",
        cascade="all, delete-orphan",
        order_by="Match.id",
    )
