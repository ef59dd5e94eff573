from __future__ import annotations

from pydantic import ConfigDict, Field

from .parsed_profile import ParsedProfile


class ProfileRecord(ParsedProfile):
    """Directory record shape: reviewed biodata plus group metadata."""

    group_name: str | None = Field(default=None, alias="groupName")
    group_profile_no: str | None = Field(default=None, alias="groupProfileNo")
    global_profile_no: str | None = Field(default=None, alias="globalProfileNo")
    added_by: str | None = Field(default=None, alias="addedBy")
    member_uid: str | None = Field(default=None, alias="memberUid")

    model_config = ConfigDict(extra="ignore", frozen=False, populate_by_name=True)
