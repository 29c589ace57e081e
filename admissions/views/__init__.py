from .admission import (
    ApplicationListView,
    application_detail,
    application_status,
    download_pdf,
    submit_application,
)
from .system import health_check

__all__ = [
    'ApplicationListView',
    'application_detail',
    'application_status',
    'download_pdf',
    'submit_application',
    'health_check',
]
