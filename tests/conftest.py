"""Pytest configuration for bs_date tests."""

import django
from django.conf import settings


def pytest_configure():
    settings.configure(
        INSTALLED_APPS=['bs_date'],
        TEMPLATES=[{
            'BACKEND': 'django.template.backends.django.DjangoTemplates',
            'APP_DIRS': True,
        }],
        USE_TZ=True,
        TIME_ZONE='UTC',
    )
    django.setup()
