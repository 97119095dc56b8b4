"""
Construction of controllers and their collaborators.

Views obtain everything through these factories so that tests can patch
a single function to swap in doubles.
"""
from .controllers.owners import OwnerController
from .controllers.vets import VetController
from .rendering import TemplateViewResolver
from .repositories import DjangoOwnerRepository, DjangoVetRepository, OwnerRepository, VetRepository
from .services.health import HealthChecker


def get_owner_repository() -> OwnerRepository:
    return DjangoOwnerRepository()


def get_vet_repository() -> VetRepository:
    return DjangoVetRepository()


def get_owner_controller() -> OwnerController:
    return OwnerController(get_owner_repository())


def get_vet_controller() -> VetController:
    return VetController(get_vet_repository())


def get_health_checker() -> HealthChecker:
    return HealthChecker(get_vet_repository())


def get_view_resolver() -> TemplateViewResolver:
    return TemplateViewResolver()
