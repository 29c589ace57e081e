from django.urls import include, path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from admissions.views.system import health_check

urlpatterns = [
    path('health/', health_check, name='health'),

    # JWT tokens for admissions staff
    path('auth/token/', TokenObtainPairView.as_view(), name='token-obtain'),
    path('auth/token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),

    path('admission/', include('admissions.urls.admission')),
]
