from __future__ import annotations

from typing import Optional

from pipelines.runner import RunContext
from services.mapping import map_to_profile_record, to_public_view


class PublishProfiles:
    """Turn reviewed profiles into directory records for one group.

    With ``public=True`` the records are reduced to their anonymous view.
    """

    def __init__(self, group_name: Optional[str] = None, added_by: Optional[str] = None, public: bool = False) -> None:
        self.group_name = group_name
        self.added_by = added_by
        self.public = public

    def run(self, ctx: RunContext) -> RunContext:
        records = []
        for i, profile in enumerate(ctx.profiles or [], start=1):
            record = map_to_profile_record(
                profile,
                group_name=self.group_name,
                group_profile_no=str(i),
                added_by=self.added_by,
            )
            records.append(to_public_view(record) if self.public else record)
        ctx.records = records
        ctx.meta["published_profiles"] = len(records)
        return ctx
