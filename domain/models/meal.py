"""
Meal ledger database model.
"""

from sqlalchemy import (
    Column,
    String,
    TIMESTAMP,
    ForeignKey,
    Boolean,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class Meal(Base):
    """One logged meal, owned by exactly one Owner for its whole lifetime"""

    __tablename__ = "meals"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(255), nullable=False)
    description = Column(String(1000), nullable=False)
    meal_date = Column(TIMESTAMP(timezone=True), nullable=False, index=True)
    on_diet = Column(Boolean, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    owner = relationship("Owner", back_populates="meals")

    def __repr__(self) -> str:
        return f"<Meal id={self.id} name={self.name!r} on_diet={self.on_diet}>"
