"""
Serializers for admission applications
Handles form submission validation and record output
"""

from django.conf import settings
from django.utils import timezone
from rest_framework import serializers

from admissions.models import Application

UPLOAD_FIELDS = ['profile_image', 'law_test_score_image', 'payment_transaction_image']

ALLOWED_UPLOAD_TYPES = ('image/', 'application/pdf')


def validate_upload(file_obj):
    """Only images and PDFs up to UPLOAD_MAX_BYTES are accepted"""
    max_bytes = settings.UPLOAD_MAX_BYTES
    if file_obj.size > max_bytes:
        raise serializers.ValidationError(
            f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB"
        )

    content_type = getattr(file_obj, 'content_type', '') or ''
    if not content_type.startswith(ALLOWED_UPLOAD_TYPES):
        raise serializers.ValidationError("Only image files and PDFs are allowed")

    return file_obj


class ApplicationSubmissionSerializer(serializers.ModelSerializer):
    """Serializer for the multipart admission form"""

    profile_image = serializers.FileField(validators=[validate_upload])
    law_test_score_image = serializers.FileField(validators=[validate_upload])
    payment_transaction_image = serializers.FileField(validators=[validate_upload])

    class Meta:
        model = Application
        fields = [
            'candidate_name', 'surname', 'email', 'guardian_name', 'date_of_birth',
            'cnic_number', 'domicile_district', 'gender', 'postal_address', 'contact_number',
            'matriculation_board', 'matriculation_year', 'matriculation_grade',
            'matriculation_marks', 'matriculation_total_marks',
            'intermediate_board', 'intermediate_year', 'intermediate_grade',
            'intermediate_marks', 'intermediate_total_marks',
            'academic_qualification', 'other_qualification', 'law_test_score',
            'payment_transaction',
            'profile_image', 'law_test_score_image', 'payment_transaction_image',
        ]

    def validate_email(self, value):
        return value.strip().lower()

    def _validate_year(self, value):
        current_year = timezone.now().year
        if value > current_year:
            raise serializers.ValidationError(f"Year cannot be later than {current_year}")
        return value

    def validate_matriculation_year(self, value):
        return self._validate_year(value)

    def validate_intermediate_year(self, value):
        return self._validate_year(value)

    def validate(self, attrs):
        if attrs.get('academic_qualification') == 'other' and not attrs.get('other_qualification'):
            raise serializers.ValidationError({
                'other_qualification': "Please specify your qualification"
            })
        return attrs


class ApplicationSerializer(serializers.ModelSerializer):
    """Serializer for reading stored applications"""

    full_name = serializers.CharField(read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = Application
        exclude = ['id']
        read_only_fields = [
            'application_id', 'submission_date', 'status', 'created_at', 'updated_at'
        ]


class ApplicationStatusSerializer(serializers.ModelSerializer):
    """Minimal status lookup output"""

    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = Application
        fields = ['application_id', 'status', 'status_display', 'submission_date']
        read_only_fields = fields
