from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Group(Base):
    __tablename__ = 'groups'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)

    memberships = relationship("ChildGroup", back_populates="group", cascade="all, delete-orphan")


class ChildGroup(Base):
    __tablename__ = 'child_groups'
    child_id = Column(Integer, ForeignKey('children.id', ondelete='CASCADE'), primary_key=True)
    group_id = Column(Integer, ForeignKey('groups.id', ondelete='CASCADE'), primary_key=True)
    assigned_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    child = relationship("Child", back_populates="group_memberships")
    group = relationship("Group", back_populates="memberships")

    __table_args__ = (
        Index('idx_child_groups_group_id', 'group_id'),
    )
