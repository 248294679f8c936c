from django.urls import path

from .views import license_status

app_name = 'enterprise'

urlpatterns = [
    path('license/status/', license_status, name='license_status'),
]
