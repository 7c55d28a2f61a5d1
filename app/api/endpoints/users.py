from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.services import user_service, match_service
from app.schemas import user_schemas, match_schemas
from app.api.dependencies import get_db

router = APIRouter()

@router.get("/", response_model=List[user_schemas.UserRead])
async def list_users_endpoint(db: Session = Depends(get_db)):
    return user_service.list_users(db=db)

@router.get("/{user_id}/matches", response_model=List[match_schemas.MatchRead])
async def get_user_matches_endpoint(user_id: int, db: Session = Depends(get_db)):
    if not user_service.user_exists(db=db, user_id=user_id):
        raise NotFoundError("User not found.")
    return match_service.get_matches_for_user(db=db, user_id=user_id)
