# Namespace for pipeline steps
from .parse_messages import ParseMessages  # noqa: F401
from .validate_profiles import ValidateProfiles  # noqa: F401
from .publish_profiles import PublishProfiles  # noqa: F401
