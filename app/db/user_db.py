from typing import List, Optional
from sqlalchemy import exists, select
from sqlalchemy.orm import Session
from app.models.user_model import User

def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)

def get_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()

def save_user(db: Session, user: User) -> User:
    db.add(user)
    db.flush()
    return user

def delete_user(db: Session, user: User) -> None:
    db.delete(user)
    db.flush()

def exists_by_email(db: Session, email: str) -> bool:
    return db.scalar(select(exists().where(User.email == email)))

def exists_by_email_excluding_id(db: Session, email: str, user_id: int) -> bool:
    return db.scalar(select(exists().where(User.email == email, User.id != user_id)))
