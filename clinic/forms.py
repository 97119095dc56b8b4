import bleach
from django import forms
from django.core.validators import RegexValidator

telephone_validator = RegexValidator(
    regex=r'^\d{10}$',
    message='Telephone must be a 10-digit number.',
    code='telephone',
)


def sanitize(v):
    return bleach.clean((v or '').strip(), tags=set(), strip=True)


class OwnerForm(forms.Form):
    """Owner input as posted by the create/update page.

    Field names follow the request parameter names.  There is no ``id``
    field; owner identity comes from the URL.
    """
    firstName = forms.CharField(max_length=30)
    lastName = forms.CharField(max_length=30)
    address = forms.CharField(max_length=255)
    city = forms.CharField(max_length=80)
    telephone = forms.CharField(max_length=20, validators=[telephone_validator])

    def clean_firstName(self):
        return sanitize(self.cleaned_data.get('firstName'))

    def clean_lastName(self):
        return sanitize(self.cleaned_data.get('lastName'))

    def clean_address(self):
        return sanitize(self.cleaned_data.get('address'))

    def clean_city(self):
        return sanitize(self.cleaned_data.get('city'))
