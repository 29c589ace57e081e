"""
Admission Service
Handles business logic for application intake and PDF generation
"""

import logging
from pathlib import Path

from django.conf import settings
from django.db import transaction

from admissions.exceptions import PDFGenerationError
from admissions.models import Application
from admissions.pdf.dispatcher import build_default_dispatcher
from admissions.utils.email import send_admission_notification, send_confirmation_email
from admissions.utils.id_generator import generate_application_id

logger = logging.getLogger(__name__)


class AdmissionService:
    """Service class for admission-related operations"""

    @staticmethod
    def pdf_path(application_id):
        """Location of the stored PDF for an application"""
        return Path(settings.PDF_OUTPUT_DIR) / f"{application_id}_application.pdf"

    @staticmethod
    def force_fallback_enabled():
        """Read the forced-fallback switch; called once per generation"""
        return bool(getattr(settings, 'FORCE_FALLBACK_PDF', False))

    @staticmethod
    @transaction.atomic
    def create_application(validated_data):
        """
        Store a submitted application with a freshly generated ID

        Args:
            validated_data: dict of model fields, uploaded files included

        Returns:
            Application: the saved record
        """
        application = Application(**validated_data)
        application.application_id = generate_application_id()
        application.save()

        logger.info(f"Application saved to database: {application.application_id}")
        return application

    @staticmethod
    def generate_pdf(application, dispatcher=None, force_fallback=None):
        """
        Render the application PDF into PDF_OUTPUT_DIR

        Returns:
            dict: {'path', 'renderer', 'bytes'} from the dispatcher

        Raises:
            PDFGenerationError: every renderer failed
        """
        if dispatcher is None:
            dispatcher = build_default_dispatcher()
        if force_fallback is None:
            force_fallback = AdmissionService.force_fallback_enabled()

        destination = AdmissionService.pdf_path(application.application_id)
        return dispatcher.render(application, destination, force_fallback=force_fallback)

    @staticmethod
    def ensure_pdf(application, dispatcher=None):
        """
        Return the stored PDF path, generating the file if it doesn't exist yet

        Raises:
            PDFGenerationError: the PDF was missing and could not be generated
        """
        path = AdmissionService.pdf_path(application.application_id)
        if path.exists():
            return path

        logger.info(f"PDF missing for {application.application_id}, generating it")
        result = AdmissionService.generate_pdf(application, dispatcher=dispatcher)
        return result['path']

    @staticmethod
    def send_notifications(application, pdf_path):
        """
        Email the application PDF to the admissions office and the applicant

        Returns:
            dict: delivery status per recipient
        """
        try:
            pdf_bytes = Path(pdf_path).read_bytes()
        except OSError as e:
            logger.error(f"Could not read PDF for notifications ({pdf_path}): {e}")
            return {'admin': False, 'applicant': False}

        return {
            'admin': send_admission_notification(application, pdf_bytes),
            'applicant': send_confirmation_email(application, pdf_bytes),
        }

    @staticmethod
    def submit_application(validated_data, dispatcher=None):
        """
        Full intake flow: store the record, render its PDF, send emails

        A PDF failure does not fail the submission; the PDF can be generated
        later on download.

        Returns:
            dict: {'application', 'pdf', 'notifications'}
        """
        application = AdmissionService.create_application(validated_data)

        pdf_result = None
        try:
            pdf_result = AdmissionService.generate_pdf(application, dispatcher=dispatcher)
            logger.info(
                f"PDF generated and saved: {pdf_result['path'].name} "
                f"({pdf_result['renderer']}, {pdf_result['bytes']} bytes)"
            )
        except PDFGenerationError as e:
            logger.error(f"PDF generation error for {application.application_id}: {e}")

        notifications = None
        if pdf_result:
            notifications = AdmissionService.send_notifications(application, pdf_result['path'])

        logger.info(f"Application processed: {application.application_id}")
        return {
            'application': application,
            'pdf': pdf_result,
            'notifications': notifications,
        }
