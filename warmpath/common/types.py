"""
Canonical profile types for the connection-strategy engine.

Profiles are read-only inputs owned by an external store. They are validated
with Pydantic so JSON from the browser extension (camelCase keys) and from
Python callers (snake_case keys) both load into the same shape.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _ProfileModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class WorkEntry(_ProfileModel):
    """One position in a work history."""
    company: str = ""
    title: str = ""
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    industry: Optional[str] = None


class EducationEntry(_ProfileModel):
    """One education record."""
    school: str = ""
    degree: Optional[str] = None
    field_of_study: Optional[str] = Field(default=None, alias="field")
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")


class Skill(_ProfileModel):
    """A named skill with optional proficiency."""
    name: str = ""
    level: Optional[str] = None
    years_of_experience: Optional[float] = Field(default=None, alias="yearsOfExperience")


class ProfileMetadata(_ProfileModel):
    """Derived profile attributes."""
    seniority: Optional[str] = None
    total_years_experience: Optional[float] = Field(default=None, alias="totalYearsExperience")
    # Used by connection sampling when a connection list is large
    connected_at: Optional[datetime] = Field(default=None, alias="connectedAt")
    activity_score: Optional[float] = Field(default=None, alias="activityScore")


class Profile(_ProfileModel):
    """
    A person's professional record.

    Every list defaults to empty, so scorers never see missing values.
    """
    id: Optional[str] = None
    name: str = "Unknown"
    email: Optional[str] = None
    public_id: Optional[str] = Field(default=None, alias="publicId")
    title: str = ""
    location: str = ""
    work_experience: List[WorkEntry] = Field(default_factory=list, alias="workExperience")
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
    metadata: ProfileMetadata = Field(default_factory=ProfileMetadata)

    @property
    def identity(self) -> Optional[str]:
        """Stable identifier (id, email or public id); None when the profile has none."""
        return self.id or self.email or self.public_id

    @property
    def key(self) -> str:
        """Graph key: the identity, falling back to the display name."""
        return self.identity or self.name

    def candidate_ids(self) -> List[str]:
        """Identifiers to try when locating this profile in a graph, in order."""
        return [value for value in (self.id, self.email, self.name, self.public_id) if value]

    def is_same_person(self, other: "Profile") -> bool:
        """True when both profiles share an id or an email."""
        if self.id and other.id and self.id == other.id:
            return True
        return bool(self.email and other.email and self.email == other.email)
