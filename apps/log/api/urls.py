"""
URL configuration for the Log API.
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.log.api.views import LimitViolationLogViewSet

router = DefaultRouter()
router.register(
    r'limit-violation-logs',
    LimitViolationLogViewSet,
    basename='limit-violation-log'
)

urlpatterns = [
    path('', include(router.urls)),
]
