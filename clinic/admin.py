"""
Django admin registrations for the clinic models.

Registering the models lets staff users inspect and correct data via
the ``/admin/`` URL during development.
"""

from django.contrib import admin

from .models import Owner, Pet, PetType, Specialty, Vet, Visit


class PetInline(admin.TabularInline):
    model = Pet
    extra = 0


@admin.register(Owner)
class OwnerAdmin(admin.ModelAdmin):
    list_display = ('id', 'first_name', 'last_name', 'city', 'telephone')
    search_fields = ('first_name', 'last_name', 'telephone')
    inlines = [PetInline]


@admin.register(Pet)
class PetAdmin(admin.ModelAdmin):
    list_display = ('name', 'type', 'birth_date', 'owner')
    list_filter = ('type',)
    search_fields = ('name', 'owner__last_name')


@admin.register(PetType)
class PetTypeAdmin(admin.ModelAdmin):
    list_display = ('id', 'name')


@admin.register(Visit)
class VisitAdmin(admin.ModelAdmin):
    list_display = ('pet', 'date', 'description')
    list_filter = ('date',)


@admin.register(Specialty)
class SpecialtyAdmin(admin.ModelAdmin):
    list_display = ('id', 'name')


@admin.register(Vet)
class VetAdmin(admin.ModelAdmin):
    list_display = ('first_name', 'last_name')
    filter_horizontal = ('specialties',)
