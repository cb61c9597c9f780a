from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from ideaspark.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column("password", String, nullable=False)
    full_name = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def to_public_dict(self) -> dict:
        """Profile fields safe to return to the client."""
        return {"id": self.id, "email": self.email, "fullName": self.full_name}
