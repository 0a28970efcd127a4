"""
Narrow data-access objects used by the auth service.

Each store wraps a DBStorage and exposes only the lookups and writes the
authentication flows need, so the service never touches the session directly.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from models.db_storage import DBStorage
from models.refresh_token import RefreshToken
from models.user import User


class UserStore:
    def __init__(self, storage: DBStorage):
        self.storage = storage

    def find_by_email_or_username(self, email: str, username: str) -> Optional[User]:
        session = self.storage.get_session()
        return (
            session.query(User)
            .filter(or_(User.email == email, User.username == username))
            .first()
        )

    def find_by_email(self, email: str) -> Optional[User]:
        session = self.storage.get_session()
        return session.query(User).filter(User.email == email).first()

    def insert(self, user: User) -> User:
        self.storage.new(user)
        self.storage.save()
        return user


class RefreshTokenStore:
    def __init__(self, storage: DBStorage):
        self.storage = storage

    def find_by_user_id(self, user_id: str) -> Optional[RefreshToken]:
        session = self.storage.get_session()
        return session.query(RefreshToken).filter(RefreshToken.user_id == user_id).first()

    def find_by_token(self, token: str) -> Optional[RefreshToken]:
        session = self.storage.get_session()
        return session.query(RefreshToken).filter(RefreshToken.token == token).first()

    def insert(self, user_id: str, token: str, expiry: datetime) -> RefreshToken:
        row = RefreshToken(user_id=user_id, token=token, expiry=expiry)
        self.storage.new(row)
        self.storage.save()
        return row

    def update(self, row: RefreshToken, token: str, expiry: datetime) -> RefreshToken:
        row.token = token
        row.expiry = expiry
        self.storage.new(row)
        self.storage.save()
        return row

    def upsert_for_user(self, user_id: str, token: str, expiry: datetime) -> RefreshToken:
        """
        Overwrite the user's refresh token, inserting the row on first login.

        A concurrent first login for the same user can win the insert; the unique
        user_id constraint then rejects ours and we overwrite theirs instead.
        """
        existing = self.find_by_user_id(user_id)
        if existing is not None:
            return self.update(existing, token, expiry)
        try:
            return self.insert(user_id, token, expiry)
        except IntegrityError:
            # DBStorage.save() already rolled back
            existing = self.find_by_user_id(user_id)
            if existing is None:
                raise
            return self.update(existing, token, expiry)
