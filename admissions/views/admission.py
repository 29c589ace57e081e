"""
Admission API Views
Handles form submission, application lookup and PDF download
"""

import logging
import os

from django.db import DatabaseError
from django.http import FileResponse
from django.urls import reverse
from rest_framework import generics, status
from rest_framework.decorators import api_view, parser_classes, permission_classes
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from admissions.exceptions import AdmissionError, PDFGenerationError
from admissions.models import Application
from admissions.pagination import AdmissionPagination
from admissions.permissions import IsAdmissionsStaff
from admissions.serializers import (
    ApplicationSerializer,
    ApplicationStatusSerializer,
    ApplicationSubmissionSerializer,
)
from admissions.serializers.application import UPLOAD_FIELDS
from admissions.services.admission_service import AdmissionService

logger = logging.getLogger(__name__)


def _get_application(application_id):
    return Application.objects.filter(application_id=application_id).first()


@api_view(['POST'])
@permission_classes([AllowAny])
@parser_classes([MultiPartParser, FormParser])
def submit_application(request):
    """
    Submit the admission form
    Expects multipart data with profile_image, law_test_score_image and
    payment_transaction_image files
    """
    serializer = ApplicationSubmissionSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        result = AdmissionService.submit_application(serializer.validated_data)
    except (AdmissionError, DatabaseError) as e:
        logger.error(f"Error submitting application: {str(e)}", exc_info=True)
        return Response(
            {'error': 'Failed to submit application', 'message': str(e)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    application = result['application']
    pdf = result['pdf']

    return Response({
        'message': 'Application submitted successfully',
        'application_id': application.application_id,
        'submission_date': application.submission_date,
        'pdf_download_url': reverse('admission-download-pdf', args=[application.application_id]),
        'pdf_renderer': pdf['renderer'] if pdf else None,
        'files': {
            field: os.path.basename(getattr(application, field).name)
            for field in UPLOAD_FIELDS
        },
    }, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([AllowAny])
def application_detail(request, application_id):
    """Get a submitted application by its application ID"""
    application = _get_application(application_id)
    if application is None:
        return Response(
            {'error': 'Application not found'},
            status=status.HTTP_404_NOT_FOUND
        )

    serializer = ApplicationSerializer(application, context={'request': request})
    return Response(serializer.data)


@api_view(['GET'])
@permission_classes([AllowAny])
def application_status(request, application_id):
    """Check the review status of an application"""
    application = _get_application(application_id)
    if application is None:
        return Response(
            {'error': 'Application not found'},
            status=status.HTTP_404_NOT_FOUND
        )

    return Response(ApplicationStatusSerializer(application).data)


class ApplicationListView(generics.ListAPIView):
    """
    List all applications, newest first
    Admissions staff only. Supports ?page=, ?limit= and ?status=
    """
    queryset = Application.objects.all().order_by('-submission_date')
    serializer_class = ApplicationSerializer
    permission_classes = [IsAdmissionsStaff]
    pagination_class = AdmissionPagination
    filterset_fields = ['status']


@api_view(['GET'])
@permission_classes([AllowAny])
def download_pdf(request, application_id):
    """
    Download the application PDF
    Generates the PDF first if it was never written
    """
    application = _get_application(application_id)
    if application is None:
        return Response(
            {'error': 'Application not found'},
            status=status.HTTP_404_NOT_FOUND
        )

    try:
        pdf_path = AdmissionService.ensure_pdf(application)
    except PDFGenerationError as e:
        logger.error(f"Error generating PDF for {application_id}: {str(e)}")
        return Response(
            {'error': 'Failed to generate PDF'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return FileResponse(
        open(pdf_path, 'rb'),
        as_attachment=True,
        filename=f"{application_id}_admission_application.pdf",
        content_type='application/pdf',
    )
