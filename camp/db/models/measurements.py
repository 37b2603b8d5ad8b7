from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Measurement(Base):
    """One recorded attempt. Append-only: rows are never updated."""
    __tablename__ = 'measurements'
    id = Column(Integer, primary_key=True, autoincrement=True)
    child_id = Column(Integer, ForeignKey('children.id', ondelete='CASCADE'), nullable=False)
    discipline_id = Column(Integer, ForeignKey('disciplines.id', ondelete='CASCADE'), nullable=False)
    value = Column(Float, nullable=False)
    attempt_number = Column(Integer, nullable=False, default=1)
    recorded_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    child = relationship("Child", back_populates="measurements")
    discipline = relationship("Discipline", back_populates="measurements")

    __table_args__ = (
        Index('idx_measurements_discipline_id', 'discipline_id'),
        Index('idx_measurements_child_discipline', 'child_id', 'discipline_id'),
        CheckConstraint("attempt_number >= 1", name='ck_measurements_attempt_number'),
    )
