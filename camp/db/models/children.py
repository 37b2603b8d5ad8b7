from sqlalchemy import Column, Integer, String, Date, DateTime, Index, CheckConstraint
from sqlalchemy.orm import relationship
from camp.enums import Gender, sql_values
from .base import Base, now_utc


class Child(Base):
    __tablename__ = 'children'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    birth_date = Column(Date, nullable=False)
    gender = Column(String(10), nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)

    group_memberships = relationship("ChildGroup", back_populates="child", cascade="all, delete-orphan")
    discipline_assignments = relationship("ChildDiscipline", back_populates="child", cascade="all, delete-orphan")
    measurements = relationship("Measurement", back_populates="child", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_children_name', 'name'),
        CheckConstraint(f"gender in ({sql_values(Gender)})", name='ck_children_gender'),
    )
