from __future__ import annotations

from typing import Any, MutableMapping

from ..models import Vet
from ..paging import Page, PageRequest
from ..repositories import VetRepository

VIEWS_VET_LIST = 'vets/vetList'

PAGE_SIZE = 5


class VetController:
    def __init__(self, vet_repository: VetRepository):
        self.vets = vet_repository

    def show_vet_list(self, page: int, model: MutableMapping[str, Any]) -> str:
        paginated = self.find_paginated(page)
        model['currentPage'] = page
        model['totalPages'] = paginated.total_pages
        model['totalItems'] = paginated.total_elements
        model['listVets'] = paginated.content
        return VIEWS_VET_LIST

    def find_paginated(self, page: int) -> Page[Vet]:
        return self.vets.find_all_paged(PageRequest.of(page - 1, PAGE_SIZE))

    def show_resources_vet_list(self) -> list[Vet]:
        return self.vets.find_all()
