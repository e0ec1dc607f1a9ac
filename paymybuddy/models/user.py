# paymybuddy/models/user.py
import uuid
from decimal import Decimal

from sqlalchemy import Column, String, Boolean, Numeric, ForeignKey, Table
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import relationship

from paymybuddy.core.database import Base

# Directed connection: user_id added buddy_id
user_buddies = Table(
    "user_buddies",
    Base.metadata,
    Column("user_id", PG_UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("buddy_id", PG_UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)

class User(Base):
    __tablename__ = "users"

    id = Column(PG_UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    is_superuser = Column(Boolean, default=False, nullable=False)
    is_verified = Column(Boolean, default=False, nullable=False)

    first_name = Column(String(length=100), nullable=True)
    last_name = Column(String(length=100), nullable=True)
    balance = Column(Numeric(12, 2), nullable=False, default=Decimal("0.00"))

    # selectin so buddies are available without lazy IO on an AsyncSession
    buddies = relationship(
        "User",
        secondary=user_buddies,
        primaryjoin=id == user_buddies.c.user_id,
        secondaryjoin=id == user_buddies.c.buddy_id,
        lazy="selectin",
    )

    def __repr__(self):
        return f"<User email={self.email} balance={self.balance}>"
