"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import BigInteger, Column, String, Text

from scripthub.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Script(Base):
    __tablename__ = "scripts"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    category = Column(String(100), nullable=False, index=True)
    content = Column(Text, nullable=False, default="")
    author = Column(String(255), nullable=False, index=True)
    # nanoseconds since the Unix epoch
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=False)
    deleted_at = Column(BigInteger, nullable=True, index=True)


class UserRole(Base):
    __tablename__ = "user_roles"

    identity = Column(String(255), primary_key=True)
    role = Column(String(20), nullable=False, default="guest")


class UserProfile(Base):
    __tablename__ = "user_profiles"

    identity = Column(String(255), primary_key=True)
    name = Column(String(100), nullable=False)
