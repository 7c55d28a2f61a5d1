from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.services import match_service
from app.schemas import match_schemas
from app.api.dependencies import get_db

router = APIRouter()

@router.get("/", response_model=List[match_schemas.MatchRead])
async def list_matches_endpoint(db: Session = Depends(get_db)):
    return match_service.list_matches(db=db)

@router.get("/{match_id}", response_model=match_schemas.MatchRead)
async def get_match_details_endpoint(match_id: int, db: Session = Depends(get_db)):
    match = match_service.get_match(db=db, match_id=match_id)
    if not match:
        raise NotFoundError("Match not found.")
    return match

@router.post("/{match_id}/play", response_model=match_schemas.MatchRead)
async def play_match_endpoint(
    match_id: int,
    play_in: match_schemas.MatchPlay,
    db: Session = Depends(get_db),
):
    return match_service.play_match(db=db, match_id=match_id, winner_user_id=play_in.winner_user_id)
