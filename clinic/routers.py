"""
URL mappings for the clinic app.

Page routes mirror the paths linked from the templates; JSON routes live
under ``/api/v1``.  Trailing slashes are omitted throughout.
"""
from django.urls import path

from .views import health, owners, vets, welcome

urlpatterns = [
    path('', welcome.welcome, name='welcome'),
    # Owners
    path('owners/new', owners.create_owner, name='owner_create'),
    path('owners/find', owners.find_owners_form, name='owner_find'),
    path('owners', owners.list_owners, name='owner_list'),
    path('owners/<int:owner_id>', owners.owner_detail, name='owner_detail'),
    path('owners/<int:owner_id>/edit', owners.edit_owner, name='owner_edit'),
    # Vets
    path('vets', vets.vet_list, name='vet_list'),
    path('api/v1/vets', vets.vet_resources, name='vet_resources'),
    # Health
    path('api/v1/health', health.health, name='health'),
]
