import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.models import tournament as tournament_model
from app.models import participant as participant_model
from app.models.tournament import TournamentStatus
from app.services import user_service

logger = logging.getLogger(__name__)

def transition(tournament: tournament_model.Tournament, target: TournamentStatus) -> tournament_model.Tournament:
    """Move a tournament to ``target``.

    Draft -> Started -> Finished is the intended flow, but no transition is
    rejected: starting an already started tournament, or finishing a draft,
    simply overwrites the status.
    """
    previous = tournament.status
    tournament.status = target.value
    logger.info(f"Tournament {tournament.id} status {previous} -> {target.value}")
    return tournament

def create_tournament(db: Session, name: str, start_date: datetime) -> tournament_model.Tournament:
    if name is None or not name.strip():
        logger.warning("Rejected tournament with blank name")
        raise ValidationError("Name is required.")

    db_tournament = tournament_model.Tournament(
        name=name.strip(),
        start_date=start_date,
        status=TournamentStatus.DRAFT.value,
    )
    db.add(db_tournament)
    db.commit()
    db.refresh(db_tournament)
    logger.info(f"Created tournament {db_tournament.id}: {db_tournament.name}")
    return db_tournament

def get_tournament(db: Session, tournament_id: int) -> Optional[tournament_model.Tournament]:
    return db.query(tournament_model.Tournament).filter(tournament_model.Tournament.id == tournament_id).first()

def require_tournament(db: Session, tournament_id: int) -> tournament_model.Tournament:
    tournament = get_tournament(db, tournament_id)
    if not tournament:
        raise NotFoundError("Tournament not found.")
    return tournament

def list_tournaments(db: Session) -> List[tournament_model.Tournament]:
    return db.query(tournament_model.Tournament).order_by(tournament_model.Tournament.id).all()

def add_participant(db: Session, tournament_id: int, user_id: int) -> tournament_model.Tournament:
    """Enroll a user. Enrolling the same user twice is a no-op."""
    tournament = require_tournament(db, tournament_id)

    if not user_service.user_exists(db, user_id):
        raise NotFoundError("User not found.")

    existing_participant = db.query(participant_model.Participant).filter(
        participant_model.Participant.tournament_id == tournament_id,
        participant_model.Participant.user_id == user_id
    ).first()
    if existing_participant:
        return tournament

    db.add(participant_model.Participant(tournament_id=tournament_id, user_id=user_id))
    db.commit()
    db.refresh(tournament)
    logger.info(f"User {user_id} joined tournament {tournament_id}")
    return tournament

def list_participants(db: Session, tournament_id: int) -> List[participant_model.Participant]:
    """Enrolled participants in insertion order."""
    require_tournament(db, tournament_id)
    return db.query(participant_model.Participant)\
        .filter(participant_model.Participant.tournament_id == tournament_id)\
        .order_by(participant_model.Participant.id)\
        .all()

def start_tournament(db: Session, tournament_id: int) -> tournament_model.Tournament:
    tournament = require_tournament(db, tournament_id)
    transition(tournament, TournamentStatus.STARTED)
    db.commit()
    db.refresh(tournament)
    return tournament

def finish_tournament(db: Session, tournament_id: int) -> tournament_model.Tournament:
    tournament = require_tournament(db, tournament_id)
    transition(tournament, TournamentStatus.FINISHED)
    db.commit()
    db.refresh(tournament)
    return tournament

def delete_tournament(db: Session, tournament_id: int) -> None:
    # Bracket, matches and enrollments go with it (relationship cascades)
    tournament = require_tournament(db, tournament_id)
    db.delete(tournament)
    db.commit()
    logger.info(f"Deleted tournament {tournament_id}")
