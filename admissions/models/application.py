import os
import random
import time

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.deconstruct import deconstructible
from django.utils.translation import gettext_lazy as _


@deconstructible
class ApplicationUploadPath:
    """
    Storage path for an uploaded application file
    Format: uploads/<field>-<epoch ms>-<random><ext>
    """

    def __init__(self, field_name):
        self.field_name = field_name

    def __call__(self, instance, filename):
        ext = os.path.splitext(filename)[1].lower()
        unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
        return f"uploads/{self.field_name}-{unique_suffix}{ext}"

    def __eq__(self, other):
        return isinstance(other, ApplicationUploadPath) and other.field_name == self.field_name


class Application(models.Model):
    """
    Admission application submitted through the online form
    """

    STATUS_CHOICES = [
        ('submitted', 'Submitted'),
        ('approved', 'Approved'),
        ('rejected', 'Rejected'),
    ]

    GENDER_CHOICES = [
        ('male', 'Male'),
        ('female', 'Female'),
    ]

    QUALIFICATION_CHOICES = [
        ('matriculation', 'Matriculation'),
        ('intermediate', 'Intermediate'),
        ('other', 'Other'),
    ]

    application_id = models.CharField(
        _('application ID'),
        max_length=20,
        unique=True,
        help_text=_('Auto-generated on submission (Format: HLC + year + 4 digits)')
    )

    # Personal information
    candidate_name = models.CharField(_('candidate name'), max_length=150)
    surname = models.CharField(_('surname'), max_length=150)
    email = models.EmailField(_('email'))
    guardian_name = models.CharField(_('guardian name'), max_length=150)
    date_of_birth = models.DateField(_('date of birth'))
    cnic_number = models.CharField(_('CNIC number'), max_length=20)
    domicile_district = models.CharField(_('domicile district'), max_length=100)
    gender = models.CharField(_('gender'), max_length=10, choices=GENDER_CHOICES)
    postal_address = models.TextField(_('postal address'))
    contact_number = models.CharField(_('contact number'), max_length=30)

    # Matriculation
    matriculation_board = models.CharField(_('matriculation board'), max_length=150)
    matriculation_year = models.PositiveIntegerField(
        _('matriculation year'),
        validators=[MinValueValidator(1990)]
    )
    matriculation_grade = models.CharField(_('matriculation grade'), max_length=20)
    matriculation_marks = models.CharField(_('matriculation marks'), max_length=20)
    matriculation_total_marks = models.CharField(
        _('matriculation total marks'), max_length=20, blank=True
    )

    # Intermediate
    intermediate_board = models.CharField(_('intermediate board'), max_length=150)
    intermediate_year = models.PositiveIntegerField(
        _('intermediate year'),
        validators=[MinValueValidator(1990)]
    )
    intermediate_grade = models.CharField(_('intermediate grade'), max_length=20)
    intermediate_marks = models.CharField(_('intermediate marks'), max_length=20)
    intermediate_total_marks = models.CharField(
        _('intermediate total marks'), max_length=20, blank=True
    )

    academic_qualification = models.CharField(
        _('academic qualification'),
        max_length=20,
        choices=QUALIFICATION_CHOICES
    )
    other_qualification = models.CharField(_('other qualification'), max_length=255, blank=True)

    law_test_score = models.PositiveSmallIntegerField(
        _('law test score'),
        validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    law_test_score_image = models.FileField(
        _('law test score certificate'),
        upload_to=ApplicationUploadPath('law_test_score_image')
    )

    payment_transaction = models.CharField(_('payment transaction'), max_length=100)
    payment_transaction_image = models.FileField(
        _('payment receipt'),
        upload_to=ApplicationUploadPath('payment_transaction_image')
    )

    profile_image = models.FileField(
        _('profile image'),
        upload_to=ApplicationUploadPath('profile_image')
    )

    # System fields
    submission_date = models.DateTimeField(_('submission date'), default=timezone.now)
    status = models.CharField(
        _('status'),
        max_length=20,
        choices=STATUS_CHOICES,
        default='submitted'
    )
    created_at = models.DateTimeField(_('created at'), auto_now_add=True)
    updated_at = models.DateTimeField(_('updated at'), auto_now=True)

    class Meta:
        verbose_name = _('Application')
        verbose_name_plural = _('Applications')
        ordering = ['-submission_date']
        indexes = [
            models.Index(fields=['status'], name='application_status_idx'),
        ]

    def __str__(self):
        return f"{self.application_id} - {self.full_name}"

    @property
    def full_name(self):
        return f"{self.candidate_name} {self.surname}".strip()

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.strip().lower()
        if not self.application_id:
            from admissions.utils.id_generator import generate_application_id
            self.application_id = generate_application_id()
        super().save(*args, **kwargs)
