"""
Email utilities for admission notifications
"""
import datetime
import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives, get_connection
from django.template.loader import render_to_string
from django.utils.html import strip_tags

from admissions.pdf.document import format_date

logger = logging.getLogger(__name__)


def wrap_with_base_template(subject, content):
    """
    Wraps the provided HTML content in the portal's base email layout.
    """
    context = {
        'subject': subject,
        'content': content,
        'portal_name': settings.PORTAL_NAME,
        'year': datetime.datetime.now().year,
    }
    try:
        return render_to_string('emails/base_template.html', context)
    except Exception as e:
        logger.warning(f"Email base template rendering failed: {e}")
        return content


def _application_context(application):
    return {
        'application': application,
        'full_name': application.full_name,
        'submission_date': format_date(application.submission_date),
        'college_name': settings.COLLEGE_NAME,
        'portal_name': settings.PORTAL_NAME,
        'contact_email': settings.CONTACT_EMAIL,
        'contact_phone': settings.CONTACT_PHONE,
    }


def _send_with_pdf(subject, template_name, context, recipients, pdf_bytes, pdf_filename):
    content = render_to_string(template_name, context)
    html_message = wrap_with_base_template(subject, content)

    msg = EmailMultiAlternatives(
        subject=subject,
        body=strip_tags(content).strip(),
        from_email=settings.DEFAULT_FROM_EMAIL,
        to=recipients,
    )
    msg.attach_alternative(html_message, "text/html")
    if pdf_bytes:
        msg.attach(pdf_filename, pdf_bytes, 'application/pdf')
    msg.send(fail_silently=False)


def send_admission_notification(application, pdf_bytes):
    """
    Notify the admissions office about a new application

    Args:
        application: Application instance
        pdf_bytes: rendered application PDF

    Returns:
        bool: True when the email was sent
    """
    admin_email = getattr(settings, 'ADMIN_EMAIL', '')
    if not admin_email:
        logger.warning("ADMIN_EMAIL not configured, skipping admin notification")
        return False

    try:
        _send_with_pdf(
            subject=f"New Admission Application - {application.application_id}",
            template_name='emails/admission_notification.html',
            context=_application_context(application),
            recipients=[admin_email],
            pdf_bytes=pdf_bytes,
            pdf_filename=f"admission-{application.application_id}.pdf",
        )
    except Exception as e:
        logger.error(f"Error sending admin notification for {application.application_id}: {e}", exc_info=True)
        return False

    logger.info(f"Admin notification sent for application {application.application_id}")
    return True


def send_confirmation_email(application, pdf_bytes):
    """
    Send the applicant a confirmation with their application PDF attached

    Returns:
        bool: True when the email was sent
    """
    if not application.email:
        logger.warning(f"No email address for application {application.application_id}")
        return False

    try:
        _send_with_pdf(
            subject=f"Application Confirmation - {application.application_id}",
            template_name='emails/admission_confirmation.html',
            context=_application_context(application),
            recipients=[application.email],
            pdf_bytes=pdf_bytes,
            pdf_filename=f"your-application-{application.application_id}.pdf",
        )
    except Exception as e:
        logger.error(f"Error sending confirmation email to {application.email}: {e}", exc_info=True)
        return False

    logger.info(f"Confirmation email sent to {application.email}")
    return True


def check_email_connection():
    """Open and close a connection with the configured email backend"""
    try:
        connection = get_connection(fail_silently=False)
        connection.open()
        connection.close()
    except Exception as e:
        logger.error(f"Email service connection failed: {e}")
        return False

    logger.info("Email service connection verified")
    return True
