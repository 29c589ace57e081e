from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Application


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    """Admin interface for admission applications"""

    list_display = ['application_id', 'candidate_name', 'surname', 'email', 'status', 'submission_date']
    list_filter = ['status', 'gender', 'academic_qualification', 'submission_date']
    search_fields = ['application_id', 'candidate_name', 'surname', 'email', 'cnic_number']
    ordering = ['-submission_date']
    readonly_fields = ['application_id', 'submission_date', 'created_at', 'updated_at']

    fieldsets = (
        (None, {'fields': ('application_id', 'status', 'submission_date')}),
        (_('Personal Information'), {'fields': (
            'candidate_name', 'surname', 'email', 'guardian_name', 'date_of_birth',
            'cnic_number', 'gender', 'domicile_district', 'contact_number', 'postal_address',
        )}),
        (_('Academic Information'), {'fields': (
            'matriculation_board', 'matriculation_year', 'matriculation_grade',
            'matriculation_marks', 'matriculation_total_marks',
            'intermediate_board', 'intermediate_year', 'intermediate_grade',
            'intermediate_marks', 'intermediate_total_marks',
            'academic_qualification', 'other_qualification', 'law_test_score',
        )}),
        (_('Payment & Documents'), {'fields': (
            'payment_transaction', 'profile_image', 'law_test_score_image', 'payment_transaction_image',
        )}),
        (_('Timestamps'), {'fields': ('created_at', 'updated_at')}),
    )
