from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship
from camp.enums import ResultType, AggregationMethod, sql_values
from .base import Base, now_utc


class Discipline(Base):
    __tablename__ = 'disciplines'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    result_type = Column(String(32), nullable=False)
    aggregation_method = Column(String(32), nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)

    assignments = relationship("ChildDiscipline", back_populates="discipline", cascade="all, delete-orphan")
    measurements = relationship("Measurement", back_populates="discipline", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_disciplines_created_at', 'created_at'),
        CheckConstraint(f"result_type in ({sql_values(ResultType)})", name='ck_disciplines_result_type'),
        CheckConstraint(
            f"aggregation_method in ({sql_values(AggregationMethod)})",
            name='ck_disciplines_aggregation_method',
        ),
    )


class ChildDiscipline(Base):
    __tablename__ = 'child_disciplines'
    child_id = Column(Integer, ForeignKey('children.id', ondelete='CASCADE'), primary_key=True)
    discipline_id = Column(Integer, ForeignKey('disciplines.id', ondelete='CASCADE'), primary_key=True)
    assigned_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    child = relationship("Child", back_populates="discipline_assignments")
    discipline = relationship("Discipline", back_populates="assignments")

    __table_args__ = (
        Index('idx_child_disciplines_discipline_id', 'discipline_id'),
    )
