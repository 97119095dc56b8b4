"""
Owner management: creation, lookup, last-name search and update.

The controller never touches HTTP objects.  Every handler returns either
a logical view name, a ``redirect:`` target, or a :class:`ModelAndView`;
the web layer resolves those through the template resolver.  Form errors
are reported through the :class:`ValidationOutcome` handed in by the
caller and one-shot messages through a :class:`FlashContext`.
"""
from __future__ import annotations

import logging
from typing import Any, MutableMapping, Optional

from ..binding import WebDataBinder
from ..exceptions import OwnerNotFound
from ..models import Owner
from ..paging import Page, PageRequest
from ..repositories import OwnerRepository
from ..validation import FlashContext, ModelAndView, ValidationOutcome

logger = logging.getLogger(__name__)

VIEWS_OWNER_CREATE_OR_UPDATE_FORM = 'owners/createOrUpdateOwnerForm'
VIEWS_FIND_OWNERS = 'owners/findOwners'
VIEWS_OWNERS_LIST = 'owners/ownersList'
VIEWS_OWNER_DETAILS = 'owners/ownerDetails'

PAGE_SIZE = 5


class OwnerController:
    def __init__(self, owner_repository: OwnerRepository):
        self.owners = owner_repository

    def set_allowed_fields(self, binder: WebDataBinder) -> None:
        binder.set_disallowed_fields('id')

    def find_owner(self, owner_id: Optional[int]) -> Owner:
        """Load the owner bound to a request, or a blank one when no id is given."""
        if owner_id is None:
            return Owner()
        owner = self.owners.find_by_id(owner_id)
        if owner is None:
            raise OwnerNotFound(owner_id)
        return owner

    def init_creation_form(self) -> str:
        return VIEWS_OWNER_CREATE_OR_UPDATE_FORM

    def process_creation_form(self, owner: Owner, result: ValidationOutcome, flash: FlashContext) -> str:
        if result.has_errors():
            flash.add_flash_attribute('error', 'There was an error in creating the owner.')
            return VIEWS_OWNER_CREATE_OR_UPDATE_FORM

        saved = self.owners.save(owner)
        logger.info('Owner created', extra={'owner_id': saved.id})
        flash.add_flash_attribute('message', 'New Owner Created')
        return f'redirect:/owners/{saved.id}'

    def init_find_form(self) -> str:
        return VIEWS_FIND_OWNERS

    def process_find_form(self, page: int, owner: Owner, result: ValidationOutcome,
                          model: MutableMapping[str, Any]) -> str:
        # no last name means a search over all owners
        if owner.last_name is None:
            owner.last_name = ''

        owners_results = self.find_paginated_for_owners_last_name(page, owner.last_name)
        if owners_results.is_empty():
            result.reject_value('lastName', 'notFound', 'not found')
            return VIEWS_FIND_OWNERS

        if owners_results.total_elements == 1:
            owner = owners_results.content[0]
            return f'redirect:/owners/{owner.id}'

        return self.add_pagination_model(page, model, owners_results)

    def add_pagination_model(self, page: int, model: MutableMapping[str, Any], paginated: Page[Owner]) -> str:
        model['currentPage'] = page
        model['totalPages'] = paginated.total_pages
        model['totalItems'] = paginated.total_elements
        model['listOwners'] = paginated.content
        return VIEWS_OWNERS_LIST

    def find_paginated_for_owners_last_name(self, page: int, last_name: str) -> Page[Owner]:
        return self.owners.find_by_last_name_starting_with(last_name, PageRequest.of(page - 1, PAGE_SIZE))

    def init_update_owner_form(self) -> str:
        return VIEWS_OWNER_CREATE_OR_UPDATE_FORM

    def process_update_owner_form(self, owner: Owner, result: ValidationOutcome, owner_id: int,
                                  flash: FlashContext) -> str:
        if owner.id is None or owner.id != owner_id:
            result.reject_value('id', 'mismatch', 'The owner ID in the form does not match the URL.')
            flash.add_flash_attribute('error', 'Owner ID mismatch. Please try again.')
            return 'redirect:/owners/{ownerId}/edit'

        if result.has_errors():
            flash.add_flash_attribute('error', 'There was an error in updating the owner.')
            return VIEWS_OWNER_CREATE_OR_UPDATE_FORM

        owner.id = owner_id
        self.owners.save(owner)
        logger.info('Owner updated', extra={'owner_id': owner_id})
        flash.add_flash_attribute('message', 'Owner Values Updated')
        return 'redirect:/owners/{ownerId}'

    def show_owner(self, owner_id: int) -> ModelAndView:
        owner = self.owners.find_by_id(owner_id)
        if owner is None:
            raise OwnerNotFound(owner_id)
        return ModelAndView(VIEWS_OWNER_DETAILS, {'owner': owner})
