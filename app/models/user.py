from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)

    participations = relationship("Participant", back_populates="user")
    # Matches reference users three ways (player1, player2, winner), so they are
    # queried explicitly from the Match side rather than navigated from here.
