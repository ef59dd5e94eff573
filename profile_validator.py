import logging
import re
from typing import Dict, List, Any

from config.settings import get_settings
from models.parsed_profile import ParsedProfile


class ProfileValidator:
    """Review checks for parsed biodata before an operator publishes it."""

    def __init__(self):
        self.validation_stats = {
            'total_profiles': 0,
            'valid_profiles': 0,
            'invalid_profiles': 0,
            'profiles_with_warnings': 0,
            'validation_errors': []
        }

    def validate_required_fields(self, profile: ParsedProfile) -> List[str]:
        """A profile cannot be listed without a name."""
        errors = []
        if not profile.name.strip():
            errors.append("Missing required field: name")
        return errors

    def validate_optional_fields(self, profile: ParsedProfile) -> List[str]:
        """Warnings for values an operator should double-check."""
        warnings = []
        settings = get_settings()

        if not profile.dob:
            warnings.append("Date of birth not found")

        if profile.age:
            try:
                age = int(profile.age)
                if age < settings.min_plausible_age or age > settings.max_plausible_age:
                    warnings.append(
                        f"Age outside plausible range "
                        f"({settings.min_plausible_age}-{settings.max_plausible_age}): {age}"
                    )
            except ValueError:
                warnings.append(f"Age should be an integer: {profile.age}")

        if profile.contact:
            digits = re.sub(r"\D", "", profile.contact)
            if len(digits) < 10:
                warnings.append("Phone number too short to be valid")

        if profile.height and not re.match(r"^\d'\d{1,2}$", profile.height):
            warnings.append(f"Height not in feet'inches form: {profile.height}")

        if profile.gender and profile.gender not in ("Male", "Female"):
            warnings.append(f"Gender should be Male or Female: {profile.gender}")

        return warnings

    def validate_profile(self, profile: ParsedProfile) -> Dict[str, Any]:
        """Validate a single profile and return validation results."""
        validation_result = {
            'is_valid': True,
            'errors': self.validate_required_fields(profile),
            'warnings': self.validate_optional_fields(profile),
            'profile': profile
        }
        validation_result['is_valid'] = len(validation_result['errors']) == 0

        # Update stats
        self.validation_stats['total_profiles'] += 1
        if validation_result['is_valid']:
            self.validation_stats['valid_profiles'] += 1
        else:
            self.validation_stats['invalid_profiles'] += 1
            self.validation_stats['validation_errors'].extend(validation_result['errors'])
        if validation_result['warnings']:
            self.validation_stats['profiles_with_warnings'] += 1

        return validation_result

    def validate_all_profiles(self, profiles: List[ParsedProfile]) -> List[ParsedProfile]:
        """Validate all profiles and return only valid ones."""
        valid_profiles = []

        logging.info(f"Starting validation of {len(profiles)} profiles")

        for i, profile in enumerate(profiles):
            validation_result = self.validate_profile(profile)

            if validation_result['is_valid']:
                valid_profiles.append(profile)
                if validation_result['warnings']:
                    logging.warning(f"Profile {i+1} has warnings: {validation_result['warnings']}")
            else:
                logging.error(f"Profile {i+1} validation failed: {validation_result['errors']}")

        logging.info(f"Validation completed. Valid: {len(valid_profiles)}, "
                    f"Invalid: {len(profiles) - len(valid_profiles)}")

        return valid_profiles

    def get_validation_stats(self) -> Dict:
        """Return validation statistics."""
        return self.validation_stats.copy()
