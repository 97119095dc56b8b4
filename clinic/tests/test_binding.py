from clinic.binding import WebDataBinder
from clinic.forms import OwnerForm
from clinic.models import Owner

VALID = {
    'firstName': 'George',
    'lastName': 'Franklin',
    'address': '110 W. Liberty St.',
    'city': 'Madison',
    'telephone': '6085551023',
}


def bind(owner, data, validate=True):
    binder = WebDataBinder(owner, form_class=OwnerForm)
    binder.set_disallowed_fields('id')
    return binder.bind(data, validate=validate)


def test_valid_input_is_copied_onto_owner():
    owner = Owner()

    result = bind(owner, VALID)

    assert not result.has_errors()
    assert owner.first_name == 'George'
    assert owner.last_name == 'Franklin'
    assert owner.telephone == '6085551023'


def test_id_from_request_is_never_applied():
    owner = Owner()

    bind(owner, {**VALID, 'id': '7'})

    assert owner.id is None


def test_id_is_applied_when_not_disallowed():
    owner = Owner()
    binder = WebDataBinder(owner)

    binder.bind({'id': 7}, validate=False)

    assert owner.id == 7


def test_missing_fields_are_required():
    result = bind(Owner(), {'firstName': 'George'})

    assert {e.field for e in result.errors} == {'lastName', 'address', 'city', 'telephone'}
    assert all(e.code == 'required' for e in result.errors)


def test_telephone_must_be_ten_digits():
    owner = Owner()

    result = bind(owner, {**VALID, 'telephone': '12345'})

    errors = result.field_errors('telephone')
    assert [(e.code, e.message) for e in errors] == [('telephone', 'Telephone must be a 10-digit number.')]
    # submitted values stay on the owner for the re-rendered form
    assert owner.telephone == '12345'


def test_markup_is_stripped():
    owner = Owner()

    bind(owner, {**VALID, 'city': '<b>Madison</b>'})

    assert owner.city == 'Madison'


def test_search_binding_without_validation_only_sets_present_fields():
    owner = Owner()

    result = bind(owner, {'lastName': 'Dav'}, validate=False)

    assert not result.has_errors()
    assert owner.last_name == 'Dav'
    assert owner.first_name == ''


def test_unknown_parameters_are_ignored():
    owner = Owner()

    bind(owner, {'lastName': 'Dav', 'is_staff': '1'}, validate=False)

    assert not hasattr(owner, 'is_staff')
