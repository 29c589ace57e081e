import pytest
from django.core import mail

from admissions.utils.email import (
    check_email_connection,
    send_admission_notification,
    send_confirmation_email,
    wrap_with_base_template,
)

PDF_BYTES = b'%PDF-1.4 application'


@pytest.mark.django_db
@pytest.mark.email
class TestAdmissionEmails:
    """Test admission notification emails"""

    def test_admin_notification(self, application, settings):
        settings.ADMIN_EMAIL = 'office@hlc.edu'

        assert send_admission_notification(application, PDF_BYTES) is True

        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.to == ['office@hlc.edu']
        assert message.subject == 'New Admission Application - HLC20250042'
        filename, content, mimetype = message.attachments[0]
        assert filename == 'admission-HLC20250042.pdf'
        assert content == PDF_BYTES
        assert mimetype == 'application/pdf'
        assert message.alternatives[0][1] == 'text/html'

    def test_admin_notification_skipped_without_address(self, application):
        assert send_admission_notification(application, PDF_BYTES) is False
        assert len(mail.outbox) == 0

    def test_confirmation_email(self, application):
        assert send_confirmation_email(application, PDF_BYTES) is True

        message = mail.outbox[0]
        assert message.to == ['ayesha.khan@example.com']
        assert message.attachments[0][0] == 'your-application-HLC20250042.pdf'
        assert 'HLC20250042' in message.body

    def test_send_failure_returns_false(self, application, settings):
        settings.EMAIL_BACKEND = 'django.core.mail.backends.smtp.EmailBackend'
        settings.EMAIL_HOST = '127.0.0.1'
        settings.EMAIL_PORT = 1
        settings.EMAIL_USE_TLS = False
        settings.EMAIL_TIMEOUT = 1

        assert send_confirmation_email(application, PDF_BYTES) is False


@pytest.mark.email
def test_wrap_with_base_template(settings):
    html = wrap_with_base_template('Subject line', '<p>Body text</p>')

    assert '<p>Body text</p>' in html
    assert settings.PORTAL_NAME in html


@pytest.mark.email
def test_check_email_connection():
    assert check_email_connection() is True
