from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from models.parsed_profile import ParsedProfile


def field_coverage(profiles: List[ParsedProfile]) -> Dict[str, int]:
    """Count, per canonical field, how many profiles have a value."""
    counts: Dict[str, int] = {}
    for p in profiles:
        for key, value in p.to_dict().items():
            counts[key] = counts.get(key, 0) + (1 if value else 0)
    return counts


def print_summary(meta: Dict[str, Any], profiles: List[ParsedProfile], output_path: Optional[Path] = None) -> None:
    """Print summary of a batch parse run."""
    validation_stats = meta.get('validation_stats', {})

    print("\n" + "="*60)
    print("BIODATA PARSING - SUMMARY")
    print("="*60)
    print(f"Messages Parsed: {meta.get('parsed_messages', 0)}")
    print(f"Profiles Published: {meta.get('published_profiles', 0)}")
    print()
    print("Validation Statistics:")
    print(f"  Valid Profiles: {validation_stats.get('valid_profiles', 0)}")
    print(f"  Invalid Profiles: {validation_stats.get('invalid_profiles', 0)}")
    print(f"  Profiles With Warnings: {validation_stats.get('profiles_with_warnings', 0)}")
    if profiles:
        print()
        print("Field Coverage:")
        for key, count in field_coverage(profiles).items():
            print(f"  {key}: {count}/{len(profiles)}")
    if output_path:
        print(f"Output File: {output_path}")
    print("="*60)
