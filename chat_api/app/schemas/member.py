"""
Pydantic schema for chat members.

A member is identified by its unique ``name``.  The ``channels`` list
holds the names of the channels the member belongs to, in the order
they were declared.
"""

from typing import List

from pydantic import BaseModel, Field, model_validator


class MemberRecord(BaseModel):
    """Stored representation of a member."""

    id: str = Field("", description="Stable identifier; defaults to the member name")
    name: str = Field(..., description="Unique member name")
    channels: List[str] = Field(default_factory=list, description="Names of joined channels")

    @model_validator(mode="after")
    def default_id(self) -> "MemberRecord":
        if not self.id:
            self.id = self.name
        return self
