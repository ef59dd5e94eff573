from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class ParsedProfile(BaseModel):
    """Parser output: every field is a string, empty when not found."""

    name: str = ""
    gender: str = ""
    age: str = ""
    height: str = ""
    dob: str = ""
    tob: str = ""
    pob: str = ""
    city: str = ""
    address: str = ""
    caste: str = ""
    gotra: str = ""
    complexion: str = ""
    diet: str = ""
    education: str = ""
    profession: str = ""
    income: str = ""
    company: str = ""
    father: str = ""
    father_occ: str = Field(default="", alias="fatherOcc")
    mother: str = ""
    mother_occ: str = Field(default="", alias="motherOcc")
    siblings: str = ""
    contact: str = ""
    manglik: str = ""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    def to_dict(self) -> Dict[str, str]:
        """Canonical field names (``fatherOcc``, ``motherOcc``) as keys."""
        return self.model_dump(by_alias=True)
