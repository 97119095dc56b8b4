"""
Unit tests for :class:`clinic.controllers.owners.OwnerController`.

The repository is a mock, so these tests never touch the database.
"""
from unittest.mock import Mock

import pytest

from clinic.binding import WebDataBinder
from clinic.controllers.owners import OwnerController
from clinic.exceptions import OwnerNotFound, ResourceNotFound
from clinic.forms import OwnerForm
from clinic.models import Owner
from clinic.paging import Page, PageRequest
from clinic.repositories import OwnerRepository
from clinic.validation import FlashContext, ValidationOutcome

VIEWS_OWNER_CREATE_OR_UPDATE_FORM = 'owners/createOrUpdateOwnerForm'


@pytest.fixture
def repository():
    return Mock(spec=OwnerRepository)


@pytest.fixture
def controller(repository):
    return OwnerController(repository)


@pytest.fixture
def owner():
    return Owner(
        id=1,
        first_name='John',
        last_name='Doe',
        address='123 Main St',
        city='Springfield',
        telephone='1234567890',
    )


@pytest.fixture
def flash():
    return FlashContext()


def failing_outcome():
    result = ValidationOutcome()
    result.reject_value('telephone', 'telephone', 'Telephone must be a 10-digit number.')
    return result


# --- set_allowed_fields ---

def test_set_allowed_fields_disallows_id(controller, owner):
    binder = WebDataBinder(owner)

    controller.set_allowed_fields(binder)

    assert binder.disallowed_fields == ('id',)


def test_bound_id_is_ignored(controller, owner):
    binder = WebDataBinder(owner, form_class=OwnerForm)
    controller.set_allowed_fields(binder)

    result = binder.bind({
        'id': '99',
        'firstName': 'Jane',
        'lastName': 'Doe',
        'address': '1 Elm St',
        'city': 'Shelbyville',
        'telephone': '0987654321',
    })

    assert not result.has_errors()
    assert owner.id == 1
    assert owner.first_name == 'Jane'


# --- find_owner ---

def test_find_owner_without_id_returns_new_owner(controller, repository):
    result = controller.find_owner(None)

    assert result is not None
    assert result.id is None
    repository.find_by_id.assert_not_called()


def test_find_owner_without_id_returns_distinct_owners(controller):
    assert controller.find_owner(None) is not controller.find_owner(None)


def test_find_owner_with_valid_id_returns_owner(controller, repository, owner):
    repository.find_by_id.return_value = owner

    result = controller.find_owner(1)

    assert result is owner
    assert result.id == 1
    assert result.first_name == 'John'
    repository.find_by_id.assert_called_once_with(1)
    repository.save.assert_not_called()


def test_find_owner_with_unknown_id_raises(controller, repository):
    repository.find_by_id.return_value = None

    with pytest.raises(OwnerNotFound) as excinfo:
        controller.find_owner(999)

    assert 'Owner not found with id: 999' in str(excinfo.value)
    assert isinstance(excinfo.value, ResourceNotFound)
    repository.find_by_id.assert_called_once_with(999)


# --- creation ---

def test_init_creation_form(controller):
    assert controller.init_creation_form() == VIEWS_OWNER_CREATE_OR_UPDATE_FORM


def test_process_creation_form_saves_and_redirects(controller, repository, owner, flash):
    repository.save.return_value = owner

    result = controller.process_creation_form(owner, ValidationOutcome(), flash)

    assert result == f'redirect:/owners/{owner.id}'
    repository.save.assert_called_once_with(owner)
    assert flash.messages == {'message': 'New Owner Created'}


def test_process_creation_form_redirects_to_assigned_id(controller, repository, flash):
    new_owner = Owner(first_name='Jane', last_name='Roe')

    def assign_id(o):
        o.id = 42
        return o

    repository.save.side_effect = assign_id

    result = controller.process_creation_form(new_owner, ValidationOutcome(), flash)

    assert result == 'redirect:/owners/42'


def test_process_creation_form_redirects_to_returned_owner(controller, repository, flash):
    new_owner = Owner(first_name='Jane', last_name='Roe')
    repository.save.return_value = Owner(id=42, first_name='Jane', last_name='Roe')

    result = controller.process_creation_form(new_owner, ValidationOutcome(), flash)

    assert result == 'redirect:/owners/42'
    assert new_owner.id is None
    repository.save.assert_called_once_with(new_owner)


def test_process_creation_form_with_errors_returns_form(controller, repository, owner, flash):
    result = controller.process_creation_form(owner, failing_outcome(), flash)

    assert result == VIEWS_OWNER_CREATE_OR_UPDATE_FORM
    repository.save.assert_not_called()
    assert flash.messages == {'error': 'There was an error in creating the owner.'}


# --- find ---

def test_init_find_form(controller):
    assert controller.init_find_form() == 'owners/findOwners'


def test_process_find_form_without_results_rejects_last_name(controller, repository, owner):
    owner.last_name = 'NonExistent'
    repository.find_by_last_name_starting_with.return_value = Page([])
    result = ValidationOutcome()
    model = {}

    view = controller.process_find_form(1, owner, result, model)

    assert view == 'owners/findOwners'
    assert result.field_errors('lastName')[0].code == 'notFound'
    assert result.field_errors('lastName')[0].message == 'not found'
    assert model == {}


def test_process_find_form_with_single_result_redirects(controller, repository, owner):
    repository.find_by_last_name_starting_with.return_value = Page([owner])

    view = controller.process_find_form(1, owner, ValidationOutcome(), {})

    assert view == f'redirect:/owners/{owner.id}'


def test_process_find_form_with_multiple_results_lists_owners(controller, repository, owner):
    owner2 = Owner(id=2, last_name='Doe')
    repository.find_by_last_name_starting_with.return_value = Page(
        [owner, owner2], PageRequest.of(0, 5), 2,
    )
    model = {}

    view = controller.process_find_form(1, owner, ValidationOutcome(), model)

    assert view == 'owners/ownersList'
    assert model['currentPage'] == 1
    assert model['totalPages'] == 1
    assert model['totalItems'] == 2
    assert model['listOwners'] == [owner, owner2]


@pytest.mark.parametrize('last_name', [None, ''])
def test_process_find_form_searches_all_for_missing_last_name(controller, repository, owner, last_name):
    owner.last_name = last_name
    repository.find_by_last_name_starting_with.return_value = Page([owner])

    view = controller.process_find_form(1, owner, ValidationOutcome(), {})

    assert view == f'redirect:/owners/{owner.id}'
    repository.find_by_last_name_starting_with.assert_called_once_with('', PageRequest(0, 5))


def test_process_find_form_converts_page_to_zero_based(controller, repository, owner):
    owner.last_name = 'Test'
    owner2 = Owner(id=2)
    repository.find_by_last_name_starting_with.return_value = Page(
        [owner, owner2], PageRequest.of(1, 5), 10,
    )
    model = {}

    view = controller.process_find_form(2, owner, ValidationOutcome(), model)

    assert view == 'owners/ownersList'
    repository.find_by_last_name_starting_with.assert_called_once_with('Test', PageRequest(1, 5))
    assert model['currentPage'] == 2
    assert model['totalPages'] == 2
    assert model['totalItems'] == 10


def test_process_find_form_rounds_total_pages_up(controller, repository, owner):
    repository.find_by_last_name_starting_with.return_value = Page(
        [Owner(id=i) for i in range(1, 6)], PageRequest.of(0, 5), 11,
    )
    model = {}

    controller.process_find_form(1, owner, ValidationOutcome(), model)

    assert model['totalPages'] == 3


# --- update ---

def test_init_update_owner_form(controller):
    assert controller.init_update_owner_form() == VIEWS_OWNER_CREATE_OR_UPDATE_FORM


def test_process_update_owner_form_saves_and_redirects(controller, repository, owner, flash):
    result = controller.process_update_owner_form(owner, ValidationOutcome(), 1, flash)

    assert result == 'redirect:/owners/{ownerId}'
    repository.save.assert_called_once_with(owner)
    assert owner.id == 1
    assert flash.messages == {'message': 'Owner Values Updated'}


def test_process_update_owner_form_with_errors_returns_form(controller, repository, owner, flash):
    result = controller.process_update_owner_form(owner, failing_outcome(), 1, flash)

    assert result == VIEWS_OWNER_CREATE_OR_UPDATE_FORM
    repository.save.assert_not_called()
    assert flash.messages == {'error': 'There was an error in updating the owner.'}


def test_process_update_owner_form_with_id_mismatch_rejects(controller, repository, owner, flash):
    result = ValidationOutcome()

    view = controller.process_update_owner_form(owner, result, 2, flash)

    assert view == 'redirect:/owners/{ownerId}/edit'
    error = result.field_errors('id')[0]
    assert error.code == 'mismatch'
    assert error.message == 'The owner ID in the form does not match the URL.'
    assert flash.messages == {'error': 'Owner ID mismatch. Please try again.'}
    repository.save.assert_not_called()


def test_process_update_owner_form_with_unset_id_is_a_mismatch(controller, repository, owner, flash):
    owner.id = None
    result = ValidationOutcome()

    view = controller.process_update_owner_form(owner, result, 5, flash)

    assert view == 'redirect:/owners/{ownerId}/edit'
    assert result.field_errors('id')[0].code == 'mismatch'
    repository.save.assert_not_called()


def test_process_update_owner_form_mismatch_wins_over_field_errors(controller, repository, owner, flash):
    result = failing_outcome()

    view = controller.process_update_owner_form(owner, result, 2, flash)

    assert view == 'redirect:/owners/{ownerId}/edit'
    assert flash.messages == {'error': 'Owner ID mismatch. Please try again.'}
    repository.save.assert_not_called()


# --- show ---

def test_show_owner_returns_details_view(controller, repository, owner):
    repository.find_by_id.return_value = owner

    mav = controller.show_owner(1)

    assert mav.view_name == 'owners/ownerDetails'
    assert mav.model['owner'] is owner
    repository.find_by_id.assert_called_once_with(1)


def test_show_owner_with_unknown_id_raises(controller, repository):
    repository.find_by_id.return_value = None

    with pytest.raises(OwnerNotFound, match='Owner not found with id: 999'):
        controller.show_owner(999)

    repository.find_by_id.assert_called_once_with(999)
