"""
Management command to print the Bikram Sambat calendar table
Usage: python manage.py bs_calendar --start-year 2080 --end-year 2082 --months
"""
from django.core.management.base import BaseCommand, CommandError

from bs_date.calendar_data import BS_CALENDAR_DATA, MAX_YEAR, MIN_YEAR, days_in_year
from bs_date.converter import bs_to_ad
from bs_date.dates import BSDate
from bs_date.formatting import NameForm, month_name


class Command(BaseCommand):
    help = 'Print month lengths and AD start dates for BS years'

    def add_arguments(self, parser):
        parser.add_argument(
            '--start-year',
            type=int,
            default=MIN_YEAR,
            help=f'Starting BS year (default: {MIN_YEAR})'
        )
        parser.add_argument(
            '--end-year',
            type=int,
            default=MAX_YEAR,
            help=f'Ending BS year (default: {MAX_YEAR})'
        )
        parser.add_argument(
            '--months',
            action='store_true',
            help='List every month with its AD start date'
        )

    def handle(self, *args, **options):
        start_year = options['start_year']
        end_year = options['end_year']

        if start_year > end_year:
            raise CommandError(f'Start year {start_year} is after end year {end_year}')

        self.stdout.write(f'BS calendar for years {start_year}-{end_year}')

        listed = 0
        for year in range(start_year, end_year + 1):
            if year not in BS_CALENDAR_DATA:
                self.stdout.write(
                    self.style.WARNING(f'Skipping year {year} - no data available')
                )
                continue

            lengths = BS_CALENDAR_DATA[year]
            ad_start = bs_to_ad(BSDate(year, 1, 1))
            self.stdout.write(
                f'{year}: {" ".join(str(days) for days in lengths)} '
                f'({days_in_year(year)} days, starts {ad_start})'
            )

            if options['months']:
                for month in range(1, 13):
                    month_start = bs_to_ad(BSDate(year, month, 1))
                    self.stdout.write(
                        f'  {month:2d} {month_name(month, NameForm.ROMANIZED):<8} '
                        f'{lengths[month - 1]} days, starts {month_start}'
                    )
            listed += 1

        self.stdout.write(
            self.style.SUCCESS(f'\nListed {listed} years ({MIN_YEAR}-{MAX_YEAR} supported)')
        )
