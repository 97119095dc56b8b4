"""
Data-access interfaces and their Django ORM implementations.

Controllers and services depend on the ``Protocol`` classes only; the
``Django*`` classes are wired in by :mod:`clinic.dependencies`.  Tests
substitute mocks that satisfy the same protocols.
"""
from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from .models import Owner, Vet
from .paging import Page, PageRequest


@runtime_checkable
class OwnerRepository(Protocol):
    def find_by_id(self, owner_id: int) -> Optional[Owner]:
        """Return the owner with the given id, or ``None``."""
        ...

    def save(self, owner: Owner) -> Owner:
        """Insert or update ``owner``; a new owner gets its id assigned."""
        ...

    def find_by_last_name_starting_with(self, last_name: str, page_request: PageRequest) -> Page[Owner]:
        """Return one page of owners whose last name starts with ``last_name``."""
        ...


@runtime_checkable
class VetRepository(Protocol):
    def find_all(self) -> list[Vet]:
        ...

    def find_all_paged(self, page_request: PageRequest) -> Page[Vet]:
        ...


def _paginate(qs, page_request: PageRequest) -> Page:
    total = qs.count()
    start = page_request.offset
    end = start + page_request.size
    return Page(content=list(qs[start:end]), page_request=page_request, total=total)


class DjangoOwnerRepository:
    def find_by_id(self, owner_id: int) -> Optional[Owner]:
        return (
            Owner.objects.prefetch_related('pets__type', 'pets__visits')
            .filter(id=owner_id)
            .first()
        )

    def save(self, owner: Owner) -> Owner:
        owner.save()
        return owner

    def find_by_last_name_starting_with(self, last_name: str, page_request: PageRequest) -> Page[Owner]:
        qs = (
            Owner.objects.filter(last_name__startswith=last_name or '')
            .prefetch_related('pets')
            .order_by('id')
        )
        return _paginate(qs, page_request)


class DjangoVetRepository:
    def find_all(self) -> list[Vet]:
        return list(Vet.objects.prefetch_related('specialties').order_by('id'))

    def find_all_paged(self, page_request: PageRequest) -> Page[Vet]:
        qs = Vet.objects.prefetch_related('specialties').order_by('id')
        return _paginate(qs, page_request)
