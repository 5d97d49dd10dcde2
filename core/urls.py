"""
URL configuration for the purchase limits project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from .views import health_check

admin.site.site_header = "Purchase Limits"
admin.site.site_title = "Purchase Limits Admin"
admin.site.index_title = "Catalog, orders and limit rules"

urlpatterns = [
    path('admin/', admin.site.urls),
    path('health/', health_check, name='health_check'),
    path('api/v1/', include('apps.api.urls', namespace='api')),
]
