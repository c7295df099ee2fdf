"""
Management command to convert a BS date to AD
Usage: python manage.py bs_to_ad 2082 5 25
"""
from django.core.management.base import BaseCommand, CommandError

from bs_date.dates import BSDate
from bs_date.exceptions import BSDateError


class Command(BaseCommand):
    help = 'Convert a Bikram Sambat (BS) date to Anno Domini (AD)'

    def add_arguments(self, parser):
        parser.add_argument('year', type=int, help='BS year (e.g. 2082)')
        parser.add_argument('month', type=int, help='BS month (1-12)')
        parser.add_argument('day', type=int, help='BS day')
        parser.add_argument(
            '--weekday',
            action='store_true',
            help='Also print the day of the week'
        )

    def handle(self, *args, **options):
        try:
            bs_date = BSDate(options['year'], options['month'], options['day'])
            ad_date = bs_date.to_ad()
        except BSDateError as e:
            raise CommandError(str(e))

        line = ad_date.isoformat()
        if options['weekday']:
            line += f" ({bs_date.day_name(localized=True)}, {bs_date.day_name()})"
        self.stdout.write(line)
