import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from app.core.exceptions import NotFoundError, ValidationError
from app.models import match as match_model
from app.services import bracket_service

logger = logging.getLogger(__name__)

def _with_players(query):
    return query.options(
        joinedload(match_model.Match.player1),
        joinedload(match_model.Match.player2),
        joinedload(match_model.Match.winner),
    )

def validate_winner(match: match_model.Match, winner_user_id: int) -> None:
    """Raises ValidationError unless winner_user_id is one of the match's players.

    An absent player2 never matches, so a bye can only be won by player1.
    """
    if winner_user_id != match.player1_id and (match.player2_id is None or winner_user_id != match.player2_id):
        raise ValidationError("Winner must be player1 or player2.")

def get_match(db: Session, match_id: int) -> Optional[match_model.Match]:
    return _with_players(db.query(match_model.Match)).filter(match_model.Match.id == match_id).first()

def list_matches(db: Session) -> List[match_model.Match]:
    return _with_players(db.query(match_model.Match)).order_by(match_model.Match.id).all()

def get_matches_for_round(db: Session, tournament_id: int, round: int) -> List[match_model.Match]:
    bracket = bracket_service.get_bracket(db, tournament_id)
    return _with_players(db.query(match_model.Match))\
        .filter(match_model.Match.bracket_id == bracket.id, match_model.Match.round == round)\
        .order_by(match_model.Match.id)\
        .all()

def get_matches_for_user(db: Session, user_id: int) -> List[match_model.Match]:
    return _with_players(db.query(match_model.Match))\
        .filter(or_(match_model.Match.player1_id == user_id, match_model.Match.player2_id == user_id))\
        .order_by(match_model.Match.round, match_model.Match.id)\
        .all()

def play_match(db: Session, match_id: int, winner_user_id: int) -> match_model.Match:
    """
    Records the winner of a match.

    Recording the same winner again succeeds without change. The result is not
    carried into a later round; only round 1 is ever materialised.
    """
    db_match = db.query(match_model.Match).filter(match_model.Match.id == match_id).first()
    if not db_match:
        raise NotFoundError("Match not found.")

    try:
        validate_winner(db_match, winner_user_id)
    except ValidationError:
        logger.warning(f"Rejected winner {winner_user_id} for match {match_id}")
        raise

    db_match.winner_id = winner_user_id
    db.commit()
    logger.info(f"Match {match_id} won by user {winner_user_id}")

    return get_match(db, match_id)
