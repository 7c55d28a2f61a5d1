from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.services import tournament_service, bracket_service, match_service
from app.schemas import tournament_schemas, participant_schemas, match_schemas
from app.api.dependencies import get_db

router = APIRouter()

@router.post("/", response_model=tournament_schemas.TournamentRead, status_code=status.HTTP_201_CREATED)
async def create_tournament_endpoint(
    tournament_in: tournament_schemas.TournamentCreate,
    db: Session = Depends(get_db),
):
    return tournament_service.create_tournament(db=db, name=tournament_in.name, start_date=tournament_in.start_date)

@router.get("/", response_model=List[tournament_schemas.TournamentRead])
async def list_tournaments_endpoint(db: Session = Depends(get_db)):
    return tournament_service.list_tournaments(db=db)

@router.get("/{tournament_id}", response_model=tournament_schemas.TournamentRead)
async def get_tournament_endpoint(tournament_id: int, db: Session = Depends(get_db)):
    return tournament_service.require_tournament(db=db, tournament_id=tournament_id)

@router.delete("/{tournament_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tournament_endpoint(tournament_id: int, db: Session = Depends(get_db)):
    tournament_service.delete_tournament(db=db, tournament_id=tournament_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/{tournament_id}/participants", response_model=tournament_schemas.TournamentRead)
async def add_participant_endpoint(
    tournament_id: int,
    participant_in: participant_schemas.ParticipantCreate,
    db: Session = Depends(get_db),
):
    return tournament_service.add_participant(db=db, tournament_id=tournament_id, user_id=participant_in.user_id)

@router.get("/{tournament_id}/participants", response_model=List[participant_schemas.ParticipantRead])
async def list_participants_endpoint(tournament_id: int, db: Session = Depends(get_db)):
    return tournament_service.list_participants(db=db, tournament_id=tournament_id)

@router.post("/{tournament_id}/start", response_model=tournament_schemas.TournamentRead)
async def start_tournament_endpoint(tournament_id: int, db: Session = Depends(get_db)):
    return tournament_service.start_tournament(db=db, tournament_id=tournament_id)

@router.post("/{tournament_id}/finish", response_model=tournament_schemas.TournamentRead)
async def finish_tournament_endpoint(tournament_id: int, db: Session = Depends(get_db)):
    return tournament_service.finish_tournament(db=db, tournament_id=tournament_id)

@router.post("/{tournament_id}/bracket", response_model=match_schemas.BracketRead)
async def generate_bracket_endpoint(tournament_id: int, db: Session = Depends(get_db)):
    return bracket_service.generate_bracket(db=db, tournament_id=tournament_id)

@router.get("/{tournament_id}/bracket", response_model=match_schemas.BracketRead)
async def get_bracket_endpoint(tournament_id: int, db: Session = Depends(get_db)):
    return bracket_service.get_bracket(db=db, tournament_id=tournament_id)

@router.get("/{tournament_id}/rounds/{round}/matches", response_model=List[match_schemas.MatchRead])
async def get_matches_for_round_endpoint(tournament_id: int, round: int, db: Session = Depends(get_db)):
    return match_service.get_matches_for_round(db=db, tournament_id=tournament_id, round=round)
