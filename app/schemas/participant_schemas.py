from pydantic import BaseModel
from .user_schemas import UserRead

class ParticipantCreate(BaseModel):
    user_id: int

class ParticipantRead(BaseModel):
    tournament_id: int
    user_id: int
    user: UserRead

    class Config:
        from_attributes = True
