import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import ValidationError
from app.models import user as user_model
from app.schemas import user_schemas

logger = logging.getLogger(__name__)

def create_user(db: Session, user_in: user_schemas.UserCreate) -> user_model.User:
    first_name = user_in.first_name.strip()
    last_name = user_in.last_name.strip()
    email = user_in.email.strip().lower()

    if not first_name or not last_name or not email:
        raise ValidationError("Invalid input.")

    # Check for email uniqueness
    existing = db.query(user_model.User).filter(user_model.User.email == email).first()
    if existing:
        raise ValidationError("Email already exists.")

    db_user = user_model.User(first_name=first_name, last_name=last_name, email=email)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info(f"Created user {db_user.id}: {email}")
    return db_user

def get_user(db: Session, user_id: int) -> Optional[user_model.User]:
    return db.query(user_model.User).filter(user_model.User.id == user_id).first()

def user_exists(db: Session, user_id: int) -> bool:
    return get_user(db, user_id) is not None

def list_users(db: Session) -> List[user_model.User]:
    return db.query(user_model.User).order_by(user_model.User.id).all()
