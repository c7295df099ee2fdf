from django import forms
from django.core.exceptions import ValidationError

from .dates import BSDate
from .exceptions import BSDateOutOfRange


class BSDateField(forms.CharField):
    """Form field accepting a BS date such as 2082-05-25 or २०८२/०५/२५"""

    default_error_messages = {
        'invalid': 'Enter a valid BS date (YYYY-MM-DD).',
        'out_of_range': '%(value)s is not a valid BS date. Supported years: %(min_year)s-%(max_year)s.',
    }

    def prepare_value(self, value):
        if isinstance(value, BSDate):
            return value.isoformat()
        return value

    def to_python(self, value):
        value = super().to_python(value)
        if value in self.empty_values:
            return None
        try:
            return BSDate.from_string(value)
        except ValueError:
            raise ValidationError(self.error_messages['invalid'], code='invalid')

    def validate(self, value):
        super().validate(value)
        if value is None:
            return
        try:
            value.to_julian_day()
        except BSDateOutOfRange as e:
            raise ValidationError(
                self.error_messages['out_of_range'],
                code='out_of_range',
                params={'value': value, 'min_year': e.min_year, 'max_year': e.max_year},
            )
