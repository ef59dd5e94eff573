import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from config.settings import get_settings
from pipelines.runner import Pipeline, RunContext
from pipelines.steps.parse_messages import ParseMessages
from pipelines.steps.validate_profiles import ValidateProfiles
from pipelines.steps.publish_profiles import PublishProfiles
from services.biodata_parser import parse_biodata
from services.mapping import map_to_profile_record, record_from_dict, to_public_view
from services.profile_filter import ProfileFilter, filter_profiles
from services.reporting import print_summary
from utils.logging_setup import init_logging
from utils.text_utils import split_messages


def _read_text(path: Optional[str]) -> str:
    if path:
        return Path(path).read_text(encoding="utf-8")
    return sys.stdin.read()


def _parse_today(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected YYYY-MM-DD, got: {value}")


def _dump(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_parse(args):
    profile = parse_biodata(_read_text(args.input), today=args.today)
    if args.public:
        _dump(to_public_view(map_to_profile_record(profile)))
    else:
        _dump(profile.to_dict())


def cmd_batch(args):
    messages = split_messages(_read_text(args.input))
    ctx = RunContext()
    ctx.messages = messages
    pipeline = Pipeline([
        ParseMessages(today=args.today),
        ValidateProfiles(),
        PublishProfiles(group_name=args.group, public=args.public),
    ])
    ctx = pipeline.run(ctx)
    records = [r if isinstance(r, dict) else r.model_dump(by_alias=True) for r in ctx.records]
    output_path = Path(args.output) if args.output else None
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
    else:
        _dump(records)
    print_summary(ctx.meta, ctx.profiles, output_path)


def cmd_search(args):
    data = json.loads(Path(args.input).read_text(encoding="utf-8"))
    rows = data.get("profiles") if isinstance(data, dict) else data
    records = [record_from_dict(row) for row in (rows or [])]
    flt = ProfileFilter(
        search=args.term or "",
        gender=args.gender,
        min_age=args.min_age,
        max_age=args.max_age,
        city=args.city or "",
        caste=args.caste or "",
        manglik=args.manglik,
    )
    found = filter_profiles(records, flt)
    _dump([r.model_dump(by_alias=True) for r in found])


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Biodata parsing CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_parse = sub.add_parser("parse", help="Parse one biodata message and print its fields as JSON")
    p_parse.add_argument("--input", "-i", help="Path to a text file (default: stdin)")
    p_parse.add_argument("--today", type=_parse_today, default=None, help="Reference date for age (YYYY-MM-DD)")
    p_parse.add_argument("--public", action="store_true", help="Print the anonymous view (contact withheld)")
    p_parse.set_defaults(func=cmd_parse)

    p_batch = sub.add_parser("batch", help="Parse, review and publish a file of several messages")
    p_batch.add_argument("--input", "-i", required=True, help="Text file; messages separated by a '---' line")
    p_batch.add_argument("--group", "-g", default=None, help="Group name attached to every record")
    p_batch.add_argument("--output", "-o", default=None, help="Write records JSON here instead of stdout")
    p_batch.add_argument("--today", type=_parse_today, default=None, help="Reference date for age (YYYY-MM-DD)")
    p_batch.add_argument("--public", action="store_true", help="Emit anonymous views (contact withheld)")
    p_batch.set_defaults(func=cmd_batch)

    p_search = sub.add_parser("search", help="Filter a JSON list of profile records")
    p_search.add_argument("--input", "-i", required=True, help="Path to JSON file (array or {'profiles': [...]})")
    p_search.add_argument("--term", "-q", default=None, help="Match name, profession, city or profile number")
    p_search.add_argument("--gender", choices=["All", "Male", "Female"], default="All")
    p_search.add_argument("--min-age", type=int, default=None)
    p_search.add_argument("--max-age", type=int, default=None)
    p_search.add_argument("--city", default=None, help="Substring of city (or place of birth)")
    p_search.add_argument("--caste", default=None, help="Substring of caste (or gotra)")
    p_search.add_argument("--manglik", choices=["All", "Yes", "No"], default="All")
    p_search.set_defaults(func=cmd_search)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
