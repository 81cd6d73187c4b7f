"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import JSON, Boolean, Column, DateTime, String, func

from sunflix.models.base import Base, new_id

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin' or 'user'. Signup always creates 'user' with approved=False;
    admins are seeded with the create_user script.
    """

    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=ROLE_USER)
    approved = Column(Boolean, nullable=False, default=False)
    avatar = Column(String(2048), nullable=True)
    favorites = Column(JSON, nullable=False, default=list)
    subscriptions = Column(JSON, nullable=False, default=list)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
