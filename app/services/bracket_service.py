import logging
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.models import bracket as bracket_model
from app.models import match as match_model
from app.services import tournament_service

logger = logging.getLogger(__name__)

FIRST_ROUND = 1
MIN_PARTICIPANTS = 2

Pairing = Tuple[int, Optional[int]]

def pair_participants(participant_ids: Sequence[int]) -> List[Pairing]:
    """
    Pairs participants for the first round of a single elimination bracket.

    Consecutive participants play each other in the order given: (0, 1), (2, 3), ...
    With an odd count the last participant gets a bye, returned as (player_id, None).
    No shuffling or seeding is applied.
    """
    pairings: List[Pairing] = []
    for i in range(0, len(participant_ids), 2):
        player1 = participant_ids[i]
        player2 = participant_ids[i + 1] if i + 1 < len(participant_ids) else None
        pairings.append((player1, player2))
    return pairings

def _build_match(player1_id: int, player2_id: Optional[int]) -> match_model.Match:
    return match_model.Match(
        round=FIRST_ROUND,
        player1_id=player1_id,
        player2_id=player2_id,
        # A bye is decided the moment it is created
        winner_id=player1_id if player2_id is None else None,
    )

def generate_bracket(db: Session, tournament_id: int) -> bracket_model.Bracket:
    """
    Creates the tournament's bracket, or resets it if one already exists.

    Regeneration discards every existing match, including recorded results, and
    rebuilds round 1 from the current participant list.
    """
    tournament = tournament_service.require_tournament(db, tournament_id)

    participant_ids = [p.user_id for p in tournament_service.list_participants(db, tournament_id)]
    if len(participant_ids) < MIN_PARTICIPANTS:
        logger.warning(f"Tournament {tournament_id} has {len(participant_ids)} participants, cannot generate bracket")
        raise ValidationError("At least 2 participants required.")

    bracket = tournament.bracket
    if bracket is None:
        bracket = bracket_model.Bracket(tournament=tournament)
        db.add(bracket)
    else:
        purged = len(bracket.matches)
        bracket.matches.clear()
        logger.info(f"Purged {purged} matches from bracket {bracket.id}")

    for player1_id, player2_id in pair_participants(participant_ids):
        bracket.matches.append(_build_match(player1_id, player2_id))

    db.commit()
    db.refresh(bracket)
    logger.info(
        f"Generated bracket {bracket.id} for tournament {tournament_id} "
        f"with {len(bracket.matches)} matches"
    )
    return bracket

def get_bracket(db: Session, tournament_id: int) -> bracket_model.Bracket:
    bracket = db.query(bracket_model.Bracket).filter(bracket_model.Bracket.tournament_id == tournament_id).first()
    if not bracket:
        raise NotFoundError("Bracket not found.")
    return bracket
