"""
Root URL configuration for the reqlog host project.
"""
from django.urls import path

from config.health import health_check

urlpatterns = [
    # Health check
    path("health/", health_check, name="health-check"),
]
