import pytest
from django.core import mail
from django.urls import reverse

from admissions.exceptions import PDFGenerationError
from admissions.models import Application
from admissions.pdf.base import Renderer
from admissions.pdf.dispatcher import PDFDispatcher
from admissions.services.admission_service import AdmissionService


class FailingRenderer(Renderer):
    name = 'text'

    def render(self, record):
        raise RuntimeError("renderer unavailable")


@pytest.fixture
def fallback_pdf(settings):
    """Render PDFs with the text renderer only, no HTML engines"""
    settings.FORCE_FALLBACK_PDF = True


@pytest.fixture
def failing_dispatcher(monkeypatch):
    monkeypatch.setattr(
        'admissions.services.admission_service.build_default_dispatcher',
        lambda: PDFDispatcher([FailingRenderer()])
    )


@pytest.mark.django_db
@pytest.mark.admission
class TestSubmitApplication:
    """Test the admission form submission endpoint"""

    def test_submit_success(self, api_client, submission_payload, fallback_pdf):
        url = reverse('admission-submit')
        response = api_client.post(url, submission_payload, format='multipart')

        assert response.status_code == 201
        application_id = response.data['application_id']
        assert application_id.startswith('HLC')
        assert len(application_id) == 11
        assert response.data['pdf_renderer'] == 'text'
        assert response.data['pdf_download_url'] == reverse('admission-download-pdf', args=[application_id])
        assert response.data['files']['profile_image'].startswith('profile_image-')
        assert response.data['files']['profile_image'].endswith('.png')

        application = Application.objects.get(application_id=application_id)
        assert application.email == 'ayesha.khan@example.com'
        assert application.status == 'submitted'
        assert AdmissionService.pdf_path(application_id).exists()

    def test_submit_sends_emails(self, api_client, submission_payload, fallback_pdf, settings):
        settings.ADMIN_EMAIL = 'office@hlc.edu'

        response = api_client.post(reverse('admission-submit'), submission_payload, format='multipart')

        assert response.status_code == 201
        assert len(mail.outbox) == 2
        recipients = sorted(message.to[0] for message in mail.outbox)
        assert recipients == ['ayesha.khan@example.com', 'office@hlc.edu']

    def test_submit_succeeds_when_pdf_fails(self, api_client, submission_payload, failing_dispatcher):
        response = api_client.post(reverse('admission-submit'), submission_payload, format='multipart')

        assert response.status_code == 201
        assert response.data['pdf_renderer'] is None
        assert Application.objects.count() == 1
        assert len(mail.outbox) == 0

    def test_submit_missing_file(self, api_client, submission_payload):
        del submission_payload['payment_transaction_image']

        response = api_client.post(reverse('admission-submit'), submission_payload, format='multipart')

        assert response.status_code == 400
        assert 'payment_transaction_image' in response.data
        assert Application.objects.count() == 0

    def test_submit_rejects_non_image_upload(self, api_client, submission_payload, upload_factory):
        submission_payload['profile_image'] = upload_factory('notes.txt', b'hello', 'text/plain')

        response = api_client.post(reverse('admission-submit'), submission_payload, format='multipart')

        assert response.status_code == 400
        assert 'profile_image' in response.data

    def test_submit_rejects_large_upload(self, api_client, submission_payload, settings):
        settings.UPLOAD_MAX_BYTES = 10

        response = api_client.post(reverse('admission-submit'), submission_payload, format='multipart')

        assert response.status_code == 400
        assert 'profile_image' in response.data

    def test_other_qualification_required(self, api_client, submission_payload):
        submission_payload['academic_qualification'] = 'other'

        response = api_client.post(reverse('admission-submit'), submission_payload, format='multipart')

        assert response.status_code == 400
        assert 'other_qualification' in response.data

    def test_future_year_rejected(self, api_client, submission_payload):
        submission_payload['intermediate_year'] = 2999

        response = api_client.post(reverse('admission-submit'), submission_payload, format='multipart')

        assert response.status_code == 400
        assert 'intermediate_year' in response.data


@pytest.mark.django_db
@pytest.mark.admission
class TestApplicationLookup:
    """Test application detail, status and listing"""

    def test_detail(self, api_client, application):
        url = reverse('admission-detail', args=[application.application_id])
        response = api_client.get(url)

        assert response.status_code == 200
        assert response.data['application_id'] == 'HLC20250042'
        assert response.data['full_name'] == 'Ayesha Khan'
        assert response.data['status_display'] == 'Submitted'

    def test_detail_not_found(self, api_client):
        response = api_client.get(reverse('admission-detail', args=['HLC20259999']))

        assert response.status_code == 404
        assert response.data == {'error': 'Application not found'}

    def test_status(self, api_client, application):
        response = api_client.get(reverse('admission-status', args=[application.application_id]))

        assert response.status_code == 200
        assert response.data['status'] == 'submitted'

    def test_status_not_found(self, api_client):
        response = api_client.get(reverse('admission-status', args=['HLC20259999']))

        assert response.status_code == 404

    def test_list_requires_staff(self, authenticated_client, application):
        response = authenticated_client.get(reverse('admission-list'))

        assert response.status_code == 403

    def test_list_requires_authentication(self, api_client, application):
        response = api_client.get(reverse('admission-list'))

        assert response.status_code == 401

    def test_list_paginated(self, staff_client, create_application):
        for suffix in range(3):
            create_application(application_id=f'HLC2025000{suffix}')

        response = staff_client.get(reverse('admission-list'), {'page': 2, 'limit': 2})

        assert response.status_code == 200
        assert len(response.data['admissions']) == 1
        assert response.data['pagination'] == {'page': 2, 'limit': 2, 'total': 3, 'pages': 2}

    def test_list_page_past_end_is_empty(self, staff_client, application):
        response = staff_client.get(reverse('admission-list'), {'page': 5, 'limit': 10})

        assert response.status_code == 200
        assert response.data['admissions'] == []
        assert response.data['pagination'] == {'page': 5, 'limit': 10, 'total': 1, 'pages': 1}

    def test_list_filter_by_status(self, staff_client, create_application):
        create_application(application_id='HLC20250001')
        create_application(application_id='HLC20250002', status='approved')

        response = staff_client.get(reverse('admission-list'), {'status': 'approved'})

        assert response.status_code == 200
        assert [a['application_id'] for a in response.data['admissions']] == ['HLC20250002']


@pytest.mark.django_db
@pytest.mark.admission
@pytest.mark.pdf
class TestDownloadPDF:
    """Test the PDF download endpoint"""

    def test_download_generates_missing_pdf(self, api_client, application, fallback_pdf):
        pdf_path = AdmissionService.pdf_path(application.application_id)
        assert not pdf_path.exists()

        response = api_client.get(reverse('admission-download-pdf', args=[application.application_id]))

        assert response.status_code == 200
        assert response['Content-Type'] == 'application/pdf'
        assert 'HLC20250042_admission_application.pdf' in response['Content-Disposition']
        assert b''.join(response.streaming_content).startswith(b'%PDF')
        assert pdf_path.exists()

    def test_download_existing_pdf(self, api_client, application):
        pdf_path = AdmissionService.pdf_path(application.application_id)
        pdf_path.parent.mkdir(parents=True, exist_ok=True)
        pdf_path.write_bytes(b'%PDF-1.4 stored')

        response = api_client.get(reverse('admission-download-pdf', args=[application.application_id]))

        assert response.status_code == 200
        assert b''.join(response.streaming_content) == b'%PDF-1.4 stored'

    def test_download_not_found(self, api_client):
        response = api_client.get(reverse('admission-download-pdf', args=['HLC20259999']))

        assert response.status_code == 404

    def test_download_generation_failure(self, api_client, application, failing_dispatcher):
        response = api_client.get(reverse('admission-download-pdf', args=[application.application_id]))

        assert response.status_code == 500
        assert response.data == {'error': 'Failed to generate PDF'}
        assert not AdmissionService.pdf_path(application.application_id).exists()


@pytest.mark.django_db
def test_health_check(api_client):
    response = api_client.get(reverse('health'))

    assert response.status_code == 200
    assert response.data['status'] == 'Server is running'


@pytest.mark.django_db
@pytest.mark.pdf
def test_generate_pdf_raises_when_all_renderers_fail(application):
    with pytest.raises(PDFGenerationError):
        AdmissionService.generate_pdf(application, dispatcher=PDFDispatcher([FailingRenderer()]))
