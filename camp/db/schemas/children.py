from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field

from camp.enums import Gender


class ChildBase(BaseModel):
    name: str = Field(min_length=1)
    birth_date: date
    gender: Gender
    model_config = ConfigDict(use_enum_values=True)


class ChildCreate(ChildBase):
    pass


class ChildUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    birth_date: date | None = None
    gender: Gender | None = None
    model_config = ConfigDict(use_enum_values=True)


class ChildFilter(BaseModel):
    name: str | None = None
    birth_date: date | None = None
    gender: Gender | None = None
    model_config = ConfigDict(use_enum_values=True)


class Child(ChildBase):
    id: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
