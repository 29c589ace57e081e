"""
Admission URL Configuration
Routes for admission form endpoints
"""

from django.urls import path

from admissions.views.admission import (
    ApplicationListView,
    application_detail,
    application_status,
    download_pdf,
    submit_application,
)

urlpatterns = [
    path('', ApplicationListView.as_view(), name='admission-list'),
    path('submit/', submit_application, name='admission-submit'),
    path('download-pdf/<str:application_id>/', download_pdf, name='admission-download-pdf'),
    path('<str:application_id>/status/', application_status, name='admission-status'),
    path('<str:application_id>/', application_detail, name='admission-detail'),
]
