"""
User reference model.

Users are owned by the accounts side of the application; plans only read
them to check trainer/client relations.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """Account roles."""

    CLIENT = "client"
    TRAINER = "trainer"
    ADMIN = "admin"


class User(BaseModel):
    """A user as seen by workout plans."""

    id: str = Field(..., min_length=1)
    role: UserRole
    is_approved: bool = Field(
        default=False,
        description="Whether a trainer account has been approved",
    )
    assigned_trainer_id: Optional[str] = Field(
        default=None,
        description="Trainer currently assigned to a client",
    )
    name: Optional[str] = None
    email: Optional[str] = None

    @property
    def is_approved_trainer(self) -> bool:
        return self.role == UserRole.TRAINER and self.is_approved

    @property
    def is_client(self) -> bool:
        return self.role == UserRole.CLIENT
