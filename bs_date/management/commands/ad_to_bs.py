"""
Management command to convert an AD date to BS
Usage: python manage.py ad_to_bs 2025-09-10 --format nepali
"""
from django.core.management.base import BaseCommand, CommandError

from bs_date.dates import BSDate
from bs_date.formatting import DATE_FORMATS


class Command(BaseCommand):
    help = 'Convert an Anno Domini (AD) date to Bikram Sambat (BS)'

    def add_arguments(self, parser):
        parser.add_argument('date', help='AD date in YYYY-MM-DD format')
        parser.add_argument(
            '--format',
            choices=DATE_FORMATS,
            default='iso',
            help='Output style (default: iso)'
        )

    def handle(self, *args, **options):
        try:
            bs_date = BSDate.from_ad(options['date'])
        except ValueError as e:
            raise CommandError(str(e))

        self.stdout.write(bs_date.format(options['format']))
