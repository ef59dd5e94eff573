from .parsed_profile import ParsedProfile
from .profile_record import ProfileRecord

__all__ = [
    "ParsedProfile",
    "ProfileRecord",
]
