import pytest
from datetime import datetime

from app.core.exceptions import NotFoundError, ValidationError
from app.models import Bracket, Match, Participant, Tournament
from app.models.tournament import TournamentStatus
from app.services import tournament_service, bracket_service


class TestTournamentService:

    def test_create_tournament_success(self, db):
        start = datetime(2026, 7, 4, 9, 30)
        tournament = tournament_service.create_tournament(db, "  Summer Cup  ", start)

        assert tournament.id is not None
        assert tournament.name == "Summer Cup" # Trimmed
        assert tournament.start_date == start
        assert tournament.status == TournamentStatus.DRAFT.value

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_create_tournament_blank_name(self, db, name):
        with pytest.raises(ValidationError, match="Name is required."):
            tournament_service.create_tournament(db, name, datetime(2026, 7, 4))
        assert db.query(Tournament).count() == 0

    def test_get_tournament_not_found(self, db):
        assert tournament_service.get_tournament(db, 999) is None
        with pytest.raises(NotFoundError, match="Tournament not found."):
            tournament_service.require_tournament(db, 999)

    def test_list_tournaments_in_creation_order(self, db, make_tournament):
        first = make_tournament("First")
        second = make_tournament("Second")
        assert [t.id for t in tournament_service.list_tournaments(db)] == [first.id, second.id]

    def test_add_participant_success(self, db, make_tournament, make_user):
        tournament = make_tournament()
        user = make_user()

        result = tournament_service.add_participant(db, tournament.id, user.id)

        assert result.id == tournament.id
        assert [p.user_id for p in result.participants] == [user.id]
        assert result.participant_count == 1

    def test_add_participant_twice_is_idempotent(self, db, make_tournament, make_user):
        tournament = make_tournament()
        user = make_user()

        tournament_service.add_participant(db, tournament.id, user.id)
        result = tournament_service.add_participant(db, tournament.id, user.id)

        assert result.id == tournament.id
        assert db.query(Participant).filter(
            Participant.tournament_id == tournament.id,
            Participant.user_id == user.id,
        ).count() == 1

    def test_add_participant_tournament_not_found(self, db, make_user):
        user = make_user()
        with pytest.raises(NotFoundError, match="Tournament not found."):
            tournament_service.add_participant(db, 12345, user.id)

    def test_add_participant_user_not_found(self, db, make_tournament):
        tournament = make_tournament()
        with pytest.raises(NotFoundError, match="User not found."):
            tournament_service.add_participant(db, tournament.id, 12345)
        assert db.query(Participant).count() == 0

    def test_add_participant_ignores_status(self, db, make_tournament, make_user):
        tournament = make_tournament()
        tournament_service.finish_tournament(db, tournament.id)

        result = tournament_service.add_participant(db, tournament.id, make_user().id)
        assert result.participant_count == 1

    def test_list_participants_insertion_order(self, db, enrolled_tournament):
        tournament, users = enrolled_tournament(4)
        participants = tournament_service.list_participants(db, tournament.id)
        assert [p.user_id for p in participants] == [u.id for u in users]

    def test_list_participants_tournament_not_found(self, db):
        with pytest.raises(NotFoundError):
            tournament_service.list_participants(db, 42)

    def test_start_and_finish(self, db, make_tournament):
        tournament = make_tournament()

        started = tournament_service.start_tournament(db, tournament.id)
        assert started.status == TournamentStatus.STARTED.value

        finished = tournament_service.finish_tournament(db, tournament.id)
        assert finished.status == TournamentStatus.FINISHED.value

    def test_transitions_are_not_guarded(self, db, make_tournament):
        tournament = make_tournament()

        # Finishing a draft and restarting a finished tournament are both accepted
        assert tournament_service.finish_tournament(db, tournament.id).status == "Finished"
        assert tournament_service.start_tournament(db, tournament.id).status == "Started"
        assert tournament_service.start_tournament(db, tournament.id).status == "Started"

    def test_start_and_finish_not_found(self, db):
        with pytest.raises(NotFoundError, match="Tournament not found."):
            tournament_service.start_tournament(db, 7)
        with pytest.raises(NotFoundError, match="Tournament not found."):
            tournament_service.finish_tournament(db, 7)

    def test_delete_tournament_cascades(self, db, enrolled_tournament):
        tournament, _ = enrolled_tournament(3)
        bracket_service.generate_bracket(db, tournament.id)
        assert db.query(Match).count() == 2

        tournament_service.delete_tournament(db, tournament.id)

        assert tournament_service.get_tournament(db, tournament.id) is None
        assert db.query(Bracket).count() == 0
        assert db.query(Match).count() == 0
        assert db.query(Participant).count() == 0

    def test_delete_tournament_not_found(self, db):
        with pytest.raises(NotFoundError, match="Tournament not found."):
            tournament_service.delete_tournament(db, 99)
