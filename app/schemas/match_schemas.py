from pydantic import BaseModel
from typing import List, Optional
from .user_schemas import UserRead

class MatchRead(BaseModel):
    id: int
    bracket_id: int
    round: int
    player1_id: int
    player2_id: Optional[int] = None
    winner_id: Optional[int] = None
    player1: UserRead
    player2: Optional[UserRead] = None
    winner: Optional[UserRead] = None

    class Config:
        from_attributes = True

class MatchPlay(BaseModel):
    winner_user_id: int

class BracketRead(BaseModel):
    id: int
    tournament_id: int
    matches: List[MatchRead] = []

    class Config:
        from_attributes = True
