from datetime import date
from pathlib import Path
from types import SimpleNamespace

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from admissions.exceptions import PDFGenerationError
from admissions.pdf.dispatcher import build_default_dispatcher

SAMPLE_APPLICATION = {
    'application_id': 'HLC20259999',
    'candidate_name': 'Diagnostic Test',
    'surname': 'User',
    'email': 'diagnostic@example.com',
    'guardian_name': 'Test Guardian',
    'date_of_birth': date(1990, 1, 1),
    'cnic_number': '12345-1234567-1',
    'domicile_district': 'Test District',
    'gender': 'male',
    'postal_address': 'Test Address 123',
    'contact_number': '+92-300-1234567',
    'matriculation_board': 'Test Board',
    'matriculation_year': 2010,
    'matriculation_grade': 'A',
    'matriculation_marks': '950',
    'matriculation_total_marks': '1100',
    'intermediate_board': 'Test Intermediate Board',
    'intermediate_year': 2012,
    'intermediate_grade': 'A',
    'intermediate_marks': '980',
    'intermediate_total_marks': '1100',
    'academic_qualification': 'intermediate',
    'other_qualification': '',
    'law_test_score': 85,
    'payment_transaction': 'TXN123456789',
    'profile_image': None,
    'law_test_score_image': None,
    'payment_transaction_image': None,
}


class Command(BaseCommand):
    help = 'Renders a sample application through the PDF fallback chain and reports which renderer was used'

    def add_arguments(self, parser):
        parser.add_argument(
            '--output-dir',
            default=None,
            help='Directory for the diagnostic PDFs (defaults to PDF_OUTPUT_DIR)',
        )

    def handle(self, *args, **options):
        output_dir = Path(options['output_dir'] or settings.PDF_OUTPUT_DIR)
        record = SimpleNamespace(submission_date=timezone.now(), **SAMPLE_APPLICATION)
        dispatcher = build_default_dispatcher()

        runs = [
            ('Normal PDF generation', 'diagnostic_normal.pdf', False),
            ('Forced fallback PDF generation', 'diagnostic_fallback.pdf', True),
        ]

        failures = 0
        for title, filename, force_fallback in runs:
            self.stdout.write(title)
            destination = output_dir / filename
            try:
                result = dispatcher.render(record, destination, force_fallback=force_fallback)
            except PDFGenerationError as e:
                failures += 1
                self.stdout.write(self.style.ERROR(f"  Failed: {e}"))
                continue

            self.stdout.write(self.style.SUCCESS(
                f"  Renderer: {result['renderer']}, size: {result['bytes']} bytes, file: {result['path']}"
            ))

        if failures == len(runs):
            raise CommandError("PDF generation failed in every mode")
