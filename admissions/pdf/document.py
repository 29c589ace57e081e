"""
Application document content shared by the PDF renderers

The HTML renderers use render_application_html(); the plain text renderer
uses application_text_lines(). Both read the record through getattr so any
object carrying the application's attributes can be rendered.
"""

from datetime import date, datetime

from django.conf import settings
from django.template.loader import render_to_string
from django.utils import timezone

from .images import build_qr_data_uri, find_logo_data_uri, image_to_data_uri

NOT_AVAILABLE = 'N/A'

PERSONAL_FIELDS = [
    ('Full Name', 'candidate_name'),
    ('Surname', 'surname'),
    ('Email', 'email'),
    ('Guardian Name', 'guardian_name'),
    ('Date of Birth', 'date_of_birth'),
    ('CNIC Number', 'cnic_number'),
    ('Gender', 'gender'),
    ('Domicile District', 'domicile_district'),
]

UPLOAD_FIELDS = [
    ('Profile Image', 'profile_image'),
    ('Law Test Score', 'law_test_score_image'),
    ('Payment Transaction', 'payment_transaction_image'),
]


def field_value(record, name):
    """Display value of a record attribute, N/A when missing or blank"""
    display = getattr(record, f'get_{name}_display', None)
    value = getattr(record, name, None)

    if value is None or value == '':
        return NOT_AVAILABLE
    if callable(display):
        return str(display())
    if isinstance(value, (date, datetime)):
        return format_date(value)
    return str(value)


def format_date(value):
    """Format a date as "July 19, 2025"; strings are returned unchanged"""
    if not value:
        return NOT_AVAILABLE
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
    elif not isinstance(value, date):
        return str(value)
    return f"{value:%B} {value.day}, {value.year}"


def marks_value(record, prefix):
    marks = field_value(record, f'{prefix}_marks')
    total = field_value(record, f'{prefix}_total_marks')
    return f"{marks}/{total}"


def academic_fields(record):
    return [
        ('Matriculation Board', field_value(record, 'matriculation_board')),
        ('Matriculation Year', field_value(record, 'matriculation_year')),
        ('Matriculation Grade', field_value(record, 'matriculation_grade')),
        ('Matriculation Marks', marks_value(record, 'matriculation')),
        ('Intermediate Board', field_value(record, 'intermediate_board')),
        ('Intermediate Year', field_value(record, 'intermediate_year')),
        ('Intermediate Grade', field_value(record, 'intermediate_grade')),
        ('Intermediate Marks', marks_value(record, 'intermediate')),
    ]


def _rows(items, size=2):
    return [items[i:i + size] for i in range(0, len(items), size)]


def build_document_context(record):
    """
    Template context for the HTML application document

    Uploads that are missing or can't be embedded get data_uri=None and
    the template renders a placeholder in their place.
    """
    application_id = field_value(record, 'application_id')
    cnic = field_value(record, 'cnic_number')

    documents = [
        {'label': label, 'data_uri': image_to_data_uri(getattr(record, name, None))}
        for label, name in UPLOAD_FIELDS
    ]

    return {
        'college_name': settings.COLLEGE_NAME,
        'portal_name': settings.PORTAL_NAME,
        'application_id': application_id,
        'submission_date': format_date(getattr(record, 'submission_date', None)),
        'generated_at': format_date(timezone.now()),
        'logo_data_uri': find_logo_data_uri(),
        'qr_data_uri': build_qr_data_uri(f"APP:{application_id}|CNIC:{cnic}"),
        'personal_rows': _rows([(label, field_value(record, name)) for label, name in PERSONAL_FIELDS]),
        'contact_number': field_value(record, 'contact_number'),
        'postal_address': field_value(record, 'postal_address'),
        'academic_rows': _rows(academic_fields(record)),
        'academic_qualification': field_value(record, 'academic_qualification'),
        'other_qualification': field_value(record, 'other_qualification'),
        'law_test_score': f"{field_value(record, 'law_test_score')}/100",
        'payment_transaction': field_value(record, 'payment_transaction'),
        'documents': documents,
    }


def render_application_html(record):
    """Render the print-ready HTML document for an application"""
    return render_to_string('admissions/application_pdf.html', build_document_context(record))


def application_text_lines(record):
    """
    Plain text lines for the minimal PDF

    Contains nothing time-dependent besides the record's own submission
    date, so identical records give identical lines.
    """
    lines = [
        f"{settings.COLLEGE_NAME} - Admission Application",
        "",
        f"Application ID: {field_value(record, 'application_id')}",
        f"Submitted: {format_date(getattr(record, 'submission_date', None))}",
        "",
        "PERSONAL INFORMATION",
        f"Name: {field_value(record, 'candidate_name')}",
        f"Surname: {field_value(record, 'surname')}",
        f"Email: {field_value(record, 'email')}",
        f"Guardian: {field_value(record, 'guardian_name')}",
        f"Date of Birth: {field_value(record, 'date_of_birth')}",
        f"CNIC: {field_value(record, 'cnic_number')}",
        f"Gender: {field_value(record, 'gender')}",
        f"Domicile: {field_value(record, 'domicile_district')}",
        f"Contact: {field_value(record, 'contact_number')}",
        f"Address: {field_value(record, 'postal_address')}",
        "",
        "ACADEMIC INFORMATION",
        f"Matriculation: {field_value(record, 'matriculation_board')} "
        f"({field_value(record, 'matriculation_year')})",
        f"Matriculation Grade: {field_value(record, 'matriculation_grade')}",
        f"Matriculation Marks: {marks_value(record, 'matriculation')}",
        "",
        f"Intermediate: {field_value(record, 'intermediate_board')} "
        f"({field_value(record, 'intermediate_year')})",
        f"Intermediate Grade: {field_value(record, 'intermediate_grade')}",
        f"Intermediate Marks: {marks_value(record, 'intermediate')}",
        "",
        f"Academic Qualification: {field_value(record, 'academic_qualification')}",
        f"Other Qualification: {field_value(record, 'other_qualification')}",
        f"Law Test Score: {field_value(record, 'law_test_score')}/100",
        "",
        "PAYMENT INFORMATION",
        f"Payment Transaction: {field_value(record, 'payment_transaction')}",
        "",
        settings.PORTAL_NAME,
    ]

    # Multi-line values such as the postal address become separate lines
    result = []
    for line in lines:
        result.extend(line.splitlines() or [''])
    return result
