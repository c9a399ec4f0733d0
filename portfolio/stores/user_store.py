"""Persistence for User rows."""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models.user import User


class UserStore:
    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def find_by_username(self, username: str) -> Optional[User]:
        if not username:
            return None
        return self.session.scalars(
            select(User).where(User.username == username)
        ).first()

    def exists_by_username(self, username: str) -> bool:
        found = self.session.scalar(
            select(User.id).where(User.username == username).limit(1)
        )
        return found is not None

    def find_all(self) -> List[User]:
        return list(self.session.scalars(select(User).order_by(User.id)))

    def save(self, user: User) -> User:
        """Insert or update a single row and commit it."""
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user
