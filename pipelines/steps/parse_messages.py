from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from pipelines.runner import RunContext
from services.biodata_parser import parse_biodata


class ParseMessages:
    def __init__(self, today: Optional[date] = None) -> None:
        self.today = today

    def run(self, ctx: RunContext) -> RunContext:
        messages = [m for m in (ctx.messages or []) if m and m.strip()]
        ctx.profiles = [parse_biodata(m, today=self.today) for m in messages]
        ctx.meta["parsed_messages"] = len(ctx.profiles)
        logging.info(
            f"Parsed {len(ctx.profiles)} biodata messages",
            extra={"step": "parse_messages", "status": "ok"},
        )
        return ctx
