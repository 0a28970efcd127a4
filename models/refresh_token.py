"""
RefreshToken model: the single persisted refresh token of a user.
Fields:
- user_id (String(36)) - FK to users.id, unique: one row per user, overwritten on login
- token (String(1024)) - the signed refresh token as handed to the client
- expiry - when the stored token stops being honoured
"""
from sqlalchemy import Column, String, DateTime, ForeignKey
from models.base_model import BaseModel, Base


class RefreshToken(BaseModel, Base):
    __tablename__ = "refresh_tokens"

    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    token = Column(String(1024), nullable=False, index=True)
    expiry = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<RefreshToken user_id={self.user_id}>"
