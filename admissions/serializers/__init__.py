from .application import (
    ApplicationSerializer,
    ApplicationStatusSerializer,
    ApplicationSubmissionSerializer,
)

__all__ = [
    'ApplicationSerializer',
    'ApplicationStatusSerializer',
    'ApplicationSubmissionSerializer',
]
