import datetime
from io import BytesIO
from types import SimpleNamespace

import pytest
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

User = get_user_model()

SUBMISSION_DATE = datetime.datetime(2025, 7, 19, 10, 30, tzinfo=datetime.timezone.utc)


@pytest.fixture(autouse=True)
def isolated_storage(settings, tmp_path):
    """Keep uploads, PDFs and outgoing mail inside the test sandbox"""
    settings.MEDIA_ROOT = tmp_path / 'media'
    settings.PDF_OUTPUT_DIR = tmp_path / 'pdfs'
    settings.PDF_LOGO_PATHS = []
    settings.EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
    settings.ADMIN_EMAIL = ''
    settings.FORCE_FALLBACK_PDF = False
    settings.PDF_TEXT_FONT_PATH = None
    settings.PDF_TEXT_BOLD_FONT_PATH = None
    return tmp_path


@pytest.fixture
def api_client():
    """API client for making requests"""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def create_user():
    """Factory fixture for creating users"""
    def _create_user(username="tester", email="test@example.com", password="testpass123", **kwargs):
        return User.objects.create_user(
            username=username,
            email=email,
            password=password,
            **kwargs
        )
    return _create_user


@pytest.fixture
def test_user(create_user):
    """Create a default test user"""
    return create_user()


@pytest.fixture
def staff_user(create_user):
    """Create an admissions office user"""
    return create_user(
        username="staff",
        email="staff@example.com",
        password="staffpass123",
        is_staff=True
    )


@pytest.fixture
def authenticated_client(api_client, test_user):
    """API client with authenticated test user"""
    api_client.force_authenticate(user=test_user)
    return api_client


@pytest.fixture
def staff_client(api_client, staff_user):
    """API client with authenticated staff user"""
    api_client.force_authenticate(user=staff_user)
    return api_client


def make_png_bytes(color='red', size=(20, 20)):
    buffer = BytesIO()
    Image.new('RGB', size, color=color).save(buffer, format='PNG')
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    return make_png_bytes()


@pytest.fixture
def png_file(tmp_path, png_bytes):
    """A small PNG written to disk"""
    path = tmp_path / 'photo.png'
    path.write_bytes(png_bytes)
    return path


@pytest.fixture
def upload_factory(png_bytes):
    """Factory for in-memory uploaded images"""
    def _upload(name='photo.png', content=None, content_type='image/png'):
        return SimpleUploadedFile(name, content if content is not None else png_bytes, content_type=content_type)
    return _upload


@pytest.fixture
def application_data():
    """Form fields of a valid submission, files excluded"""
    return {
        'candidate_name': 'Ayesha',
        'surname': 'Khan',
        'email': 'Ayesha.Khan@Example.com',
        'guardian_name': 'Imran Khan',
        'date_of_birth': '2003-04-12',
        'cnic_number': '41303-1234567-2',
        'domicile_district': 'Hyderabad',
        'gender': 'female',
        'postal_address': 'House 12, Latifabad Unit 7\nHyderabad',
        'contact_number': '+92-300-1234567',
        'matriculation_board': 'BISE Hyderabad',
        'matriculation_year': 2019,
        'matriculation_grade': 'A1',
        'matriculation_marks': '980',
        'matriculation_total_marks': '1100',
        'intermediate_board': 'BISE Hyderabad',
        'intermediate_year': 2021,
        'intermediate_grade': 'A',
        'intermediate_marks': '890',
        'intermediate_total_marks': '1100',
        'academic_qualification': 'intermediate',
        'other_qualification': '',
        'law_test_score': 72,
        'payment_transaction': 'TXN-884422',
    }


@pytest.fixture
def submission_payload(application_data, upload_factory):
    """Multipart payload for the submit endpoint"""
    return {
        **application_data,
        'profile_image': upload_factory('profile.png'),
        'law_test_score_image': upload_factory('score.png'),
        'payment_transaction_image': upload_factory('receipt.png'),
    }


@pytest.fixture
def create_application(application_data, upload_factory):
    """Factory fixture for stored applications with real upload files"""
    from admissions.models import Application

    def _create_application(**kwargs):
        data = {
            **application_data,
            'date_of_birth': datetime.date(2003, 4, 12),
            'profile_image': upload_factory('profile.png'),
            'law_test_score_image': upload_factory('score.png'),
            'payment_transaction_image': upload_factory('receipt.png'),
        }
        data.update(kwargs)
        return Application.objects.create(**data)
    return _create_application


@pytest.fixture
def application(create_application):
    return create_application(application_id='HLC20250042', submission_date=SUBMISSION_DATE)


@pytest.fixture
def record():
    """Plain attribute record without uploads, for renderer tests"""
    return SimpleNamespace(
        application_id='HLC20250001',
        candidate_name='Bilal',
        surname='Ahmed',
        email='bilal@example.com',
        guardian_name='Naveed Ahmed',
        date_of_birth=datetime.date(2002, 1, 5),
        cnic_number='41303-7654321-1',
        domicile_district='Jamshoro',
        gender='male',
        postal_address='Street 4, Qasimabad',
        contact_number='+92-333-7654321',
        matriculation_board='BISE Hyderabad',
        matriculation_year=2018,
        matriculation_grade='A',
        matriculation_marks='900',
        matriculation_total_marks='1100',
        intermediate_board='BISE Hyderabad',
        intermediate_year=2020,
        intermediate_grade='B',
        intermediate_marks='800',
        intermediate_total_marks='1100',
        academic_qualification='intermediate',
        other_qualification='',
        law_test_score=65,
        payment_transaction='TXN-1',
        profile_image=None,
        law_test_score_image=None,
        payment_transaction_image=None,
        submission_date=SUBMISSION_DATE,
    )
