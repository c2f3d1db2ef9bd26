"""
Pydantic Schemas for Customer Ledger Input

These schemas validate what callers hand to the ledger before anything is
stored. A new customer carries neither an id nor a revenue ledger; both
are assigned by the ledger. Partial updates can touch every profile field
except those two.
"""

from datetime import datetime
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.entities import CustomerStatus, InfluenceTier, Stakeholder


class StakeholderDraft(BaseModel):
    """A stakeholder as supplied by the caller."""
    model_config = ConfigDict(extra="forbid")

    id: Optional[str] = Field(
        description="Stakeholder id; generated when omitted",
        default=None
    )
    name: str
    role: str = ""
    influence: InfluenceTier = Field(
        description="Weight in the purchase decision"
    )
    email: str = ""
    phone: Optional[str] = None
    notes: Optional[str] = None

    def to_stakeholder(self, id_factory: Callable[[], str]) -> Stakeholder:
        return Stakeholder(
            id=self.id or id_factory(),
            name=self.name,
            role=self.role,
            influence=self.influence,
            email=self.email,
            phone=self.phone,
            notes=self.notes
        )


class CustomerDraft(BaseModel):
    """A customer profile without id and revenue."""
    model_config = ConfigDict(extra="forbid")

    company: str = Field(min_length=1)
    industry: str = ""
    size: str = ""
    budget: str = ""
    website: str = ""
    status: CustomerStatus = CustomerStatus.PROSPECT
    pain_points: List[str] = Field(default_factory=list)
    requirements: List[str] = Field(default_factory=list)
    stakeholders: List[StakeholderDraft] = Field(default_factory=list)
    current_solution: Optional[str] = None
    timeline: str = ""
    notes: str = ""
    last_contact: datetime = Field(default_factory=datetime.now)

    def to_profile_fields(self, id_factory: Callable[[], str]) -> dict:
        fields = self.model_dump(exclude={"stakeholders"})
        fields["stakeholders"] = tuple(
            s.to_stakeholder(id_factory) for s in self.stakeholders
        )
        return fields


class CustomerUpdate(BaseModel):
    """
    Partial update of a customer profile.

    Only the fields the caller actually supplied are applied. id and
    revenue are rejected outright; sales go through the revenue operation.
    """
    model_config = ConfigDict(extra="forbid")

    company: Optional[str] = Field(default=None, min_length=1)
    industry: Optional[str] = None
    size: Optional[str] = None
    budget: Optional[str] = None
    website: Optional[str] = None
    status: Optional[CustomerStatus] = None
    pain_points: Optional[List[str]] = None
    requirements: Optional[List[str]] = None
    stakeholders: Optional[List[StakeholderDraft]] = None
    current_solution: Optional[str] = None
    timeline: Optional[str] = None
    notes: Optional[str] = None
    last_contact: Optional[datetime] = None

    @model_validator(mode="after")
    def _no_null_required_fields(self) -> "CustomerUpdate":
        for name in self.model_fields_set:
            if name != "current_solution" and getattr(self, name) is None:
                raise ValueError(f"Field '{name}' cannot be set to null")
        return self

    def to_profile_updates(self, id_factory: Callable[[], str]) -> dict:
        updates = self.model_dump(exclude_unset=True, exclude={"stakeholders"})
        if "stakeholders" in self.model_fields_set:
            updates["stakeholders"] = tuple(
                s.to_stakeholder(id_factory) for s in self.stakeholders
            )
        return updates
