"""URL configuration for the sports-space booking service.

The `urlpatterns` list routes URLs to views. It includes the Django admin
and the booking engine's API router.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/bookings/', include('apps.bookings.urls')),
]
