from app.core.database import Base

# Import all models here to ensure they are registered with Base
from .user import User
from .tournament import Tournament, TournamentStatus
from .participant import Participant
from .bracket import Bracket
from .match import Match

# Tables are created on application startup (see app.main) so that importing
# the models never touches the configured database.
