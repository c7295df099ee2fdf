from django.core import checks

from .conf import NUMERAL_TABLES, get_setting
from .formatting import DATE_FORMATS, NameForm


@checks.register('bs_date')
def check_settings(app_configs, **kwargs):
    """Report invalid BS_DATE_* settings"""
    errors = []

    name_forms = [form.value for form in NameForm]
    if get_setting('NAME_FORM') not in name_forms:
        errors.append(checks.Error(
            f"BS_DATE_NAME_FORM must be one of {name_forms}.",
            id='bs_date.E001',
        ))

    if get_setting('FORMAT') not in DATE_FORMATS:
        errors.append(checks.Error(
            f"BS_DATE_FORMAT must be one of {list(DATE_FORMATS)}.",
            id='bs_date.E002',
        ))

    if get_setting('NUMERALS') not in NUMERAL_TABLES:
        errors.append(checks.Error(
            f"BS_DATE_NUMERALS must be one of {list(NUMERAL_TABLES)}.",
            id='bs_date.E003',
        ))

    return errors
