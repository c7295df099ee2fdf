"""
Management command to list Nepal fiscal years
Usage: python manage.py fiscal_years --start-year 2080 --end-year 2085
"""
from django.core.management.base import BaseCommand

from bs_date.calendar_data import BS_CALENDAR_DATA, MAX_YEAR, MIN_YEAR
from bs_date.conf import local_today
from bs_date.fiscal import get_fiscal_year_dates


class Command(BaseCommand):
    help = 'List Nepal fiscal years with their AD date ranges'

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

    def handle(self, *args, **options):
        start_year = options['start_year']
        end_year = options['end_year']

        self.stdout.write(f'Fiscal years for BS {start_year}-{end_year}...')

        listed = 0
        current = None
        today = local_today()

        for year in range(start_year, end_year + 1):
            # Fiscal year format: 2080/81
            fiscal_year_str = f"{year}/{str(year + 1)[-2:]}"

            if year not in BS_CALENDAR_DATA or (year + 1) not in BS_CALENDAR_DATA:
                self.stdout.write(
                    self.style.WARNING(f'Skipping FY {fiscal_year_str} - incomplete data')
                )
                continue

            ad_start, ad_end = get_fiscal_year_dates(fiscal_year_str)
            total_days = (ad_end - ad_start).days + 1

            # Calculate English fiscal year
            if ad_start.year == ad_end.year:
                fiscal_year_english = str(ad_start.year)
            else:
                fiscal_year_english = f"{ad_start.year}/{str(ad_end.year)[-2:]}"

            is_current = ad_start <= today <= ad_end
            if is_current:
                current = fiscal_year_str

            current_marker = ' [CURRENT]' if is_current else ''
            self.stdout.write(
                f'FY {fiscal_year_str} (AD: {fiscal_year_english}): '
                f'{ad_start} to {ad_end} ({total_days} days){current_marker}'
            )
            listed += 1

        self.stdout.write('\n' + '=' * 60)
        self.stdout.write(self.style.SUCCESS(f'Listed {listed} fiscal years'))

        if current:
            self.stdout.write(self.style.SUCCESS(f'Current Fiscal Year: {current}'))
        else:
            self.stdout.write(self.style.WARNING('No current fiscal year in range'))
