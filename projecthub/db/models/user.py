from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, JSON, Boolean
from sqlalchemy.orm import relationship

from projecthub.core.acl import Actor
from projecthub.core.acl.roles import DEFAULT_USER_ROLES, role_names
from projecthub.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    name = Column(String(255))
    roles = Column(JSON, nullable=False, default=lambda: role_names(DEFAULT_USER_ROLES))
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    projects = relationship("Project", back_populates="owner")

    def to_actor(self) -> Actor:
        """Build the request actor for this user."""
        return Actor.create(id=self.id, roles=self.roles or [], username=self.username)
