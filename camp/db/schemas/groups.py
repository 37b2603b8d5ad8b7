from __future__ import annotations

from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from .children import Child


class GroupBase(BaseModel):
    name: str = Field(min_length=1)


class GroupCreate(GroupBase):
    pass


class GroupUpdate(GroupBase):
    pass


class Group(GroupBase):
    id: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ChildGroup(BaseModel):
    child_id: int
    group_id: int
    assigned_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ChildWithGroups(Child):
    groups: List[Group] = []


class GroupWithChildren(Group):
    children: List[Child] = []
