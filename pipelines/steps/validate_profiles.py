from __future__ import annotations

from pipelines.runner import RunContext
from profile_validator import ProfileValidator


class ValidateProfiles:
    def __init__(self) -> None:
        self.validator = ProfileValidator()

    def run(self, ctx: RunContext) -> RunContext:
        ctx.profiles = self.validator.validate_all_profiles(list(ctx.profiles or []))
        # Attach validation stats into meta for the run summary
        ctx.meta["validation_stats"] = self.validator.get_validation_stats()
        return ctx
