from django.apps import AppConfig


class BSDateConfig(AppConfig):
    name = 'bs_date'
    verbose_name = 'Bikram Sambat Dates'

    def ready(self):
        """Register system checks when app is ready"""
        from . import checks  # noqa: F401
