import admissions.models.application
import django.core.validators
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Application",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "application_id",
                    models.CharField(
                        help_text="Auto-generated on submission (Format: HLC + year + 4 digits)",
                        max_length=20,
                        unique=True,
                        verbose_name="application ID",
                    ),
                ),
                ("candidate_name", models.CharField(max_length=150, verbose_name="candidate name")),
                ("surname", models.CharField(max_length=150, verbose_name="surname")),
                ("email", models.EmailField(max_length=254, verbose_name="email")),
                ("guardian_name", models.CharField(max_length=150, verbose_name="guardian name")),
                ("date_of_birth", models.DateField(verbose_name="date of birth")),
                ("cnic_number", models.CharField(max_length=20, verbose_name="CNIC number")),
                ("domicile_district", models.CharField(max_length=100, verbose_name="domicile district")),
                (
                    "gender",
                    models.CharField(
                        choices=[("male", "Male"), ("female", "Female")],
                        max_length=10,
                        verbose_name="gender",
                    ),
                ),
                ("postal_address", models.TextField(verbose_name="postal address")),
                ("contact_number", models.CharField(max_length=30, verbose_name="contact number")),
                ("matriculation_board", models.CharField(max_length=150, verbose_name="matriculation board")),
                (
                    "matriculation_year",
                    models.PositiveIntegerField(
                        validators=[django.core.validators.MinValueValidator(1990)],
                        verbose_name="matriculation year",
                    ),
                ),
                ("matriculation_grade", models.CharField(max_length=20, verbose_name="matriculation grade")),
                ("matriculation_marks", models.CharField(max_length=20, verbose_name="matriculation marks")),
                (
                    "matriculation_total_marks",
                    models.CharField(blank=True, max_length=20, verbose_name="matriculation total marks"),
                ),
                ("intermediate_board", models.CharField(max_length=150, verbose_name="intermediate board")),
                (
                    "intermediate_year",
                    models.PositiveIntegerField(
                        validators=[django.core.validators.MinValueValidator(1990)],
                        verbose_name="intermediate year",
                    ),
                ),
                ("intermediate_grade", models.CharField(max_length=20, verbose_name="intermediate grade")),
                ("intermediate_marks", models.CharField(max_length=20, verbose_name="intermediate marks")),
                (
                    "intermediate_total_marks",
                    models.CharField(blank=True, max_length=20, verbose_name="intermediate total marks"),
                ),
                (
                    "academic_qualification",
                    models.CharField(
                        choices=[
                            ("matriculation", "Matriculation"),
                            ("intermediate", "Intermediate"),
                            ("other", "Other"),
                        ],
                        max_length=20,
                        verbose_name="academic qualification",
                    ),
                ),
                (
                    "other_qualification",
                    models.CharField(blank=True, max_length=255, verbose_name="other qualification"),
                ),
                (
                    "law_test_score",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(100),
                        ],
                        verbose_name="law test score",
                    ),
                ),
                (
                    "law_test_score_image",
                    models.FileField(
                        upload_to=admissions.models.application.ApplicationUploadPath("law_test_score_image"),
                        verbose_name="law test score certificate",
                    ),
                ),
                ("payment_transaction", models.CharField(max_length=100, verbose_name="payment transaction")),
                (
                    "payment_transaction_image",
                    models.FileField(
                        upload_to=admissions.models.application.ApplicationUploadPath("payment_transaction_image"),
                        verbose_name="payment receipt",
                    ),
                ),
                (
                    "profile_image",
                    models.FileField(
                        upload_to=admissions.models.application.ApplicationUploadPath("profile_image"),
                        verbose_name="profile image",
                    ),
                ),
                (
                    "submission_date",
                    models.DateTimeField(default=django.utils.timezone.now, verbose_name="submission date"),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("submitted", "Submitted"), ("approved", "Approved"), ("rejected", "Rejected")],
                        default="submitted",
                        max_length=20,
                        verbose_name="status",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
            ],
            options={
                "verbose_name": "Application",
                "verbose_name_plural": "Applications",
                "ordering": ["-submission_date"],
                "indexes": [models.Index(fields=["status"], name="application_status_idx")],
            },
        ),
    ]
