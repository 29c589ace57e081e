"""
Utility functions for generating application IDs
"""
import random

from django.conf import settings
from django.utils import timezone

from admissions.exceptions import ApplicationIdError


def generate_random_digits(length=4):
    """Generate a zero-padded random number string"""
    return str(random.randint(0, 10 ** length - 1)).zfill(length)


def build_application_id(year=None, suffix=None):
    """
    Build an application ID from its parts

    Args:
        year (int, optional): Year component, defaults to the current year
        suffix (str, optional): Four digit suffix, random when omitted

    Returns:
        str: An ID like "HLC20250042"
    """
    prefix = getattr(settings, 'APPLICATION_ID_PREFIX', 'HLC')
    if year is None:
        year = timezone.now().year
    if suffix is None:
        suffix = generate_random_digits(4)
    return f"{prefix}{year}{suffix}"


def generate_application_id(max_attempts=None):
    """
    Generate an application ID not yet used by any stored application

    Raises:
        ApplicationIdError: if every attempt collided with an existing ID
    """
    from admissions.models import Application

    if max_attempts is None:
        max_attempts = getattr(settings, 'APPLICATION_ID_MAX_ATTEMPTS', 10)

    for _ in range(max_attempts):
        candidate = build_application_id()
        if not Application.objects.filter(application_id=candidate).exists():
            return candidate

    raise ApplicationIdError(
        f"Could not generate a unique application ID after {max_attempts} attempts"
    )
