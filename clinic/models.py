"""
Database models for the pet clinic.

These models capture the core concepts of the clinic: owners and their
pets, the visits those pets make, and the veterinarians with their
specialties.  Owner identity is assigned by the database on first save
and is never taken from user input.
"""
from __future__ import annotations

from django.db import models


class NamedEntity(models.Model):
    """Abstract base for entities whose display form is a single name.

    The string form is the name exactly as stored, whitespace included.
    A missing name renders as ``<null>``.
    """
    name = models.CharField(max_length=80, null=True, blank=True)

    class Meta:
        abstract = True

    def __str__(self) -> str:
        if self.name is None:
            return "<null>"
        return self.name


class Person(models.Model):
    """Abstract base holding the first/last name pair."""
    first_name = models.CharField(max_length=30)
    last_name = models.CharField(max_length=30, db_index=True)

    class Meta:
        abstract = True

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Owner(Person):
    """A clinic customer with contact details and owned pets."""
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=80)
    telephone = models.CharField(max_length=20)

    class Meta:
        ordering = ['id']

    def is_new(self) -> bool:
        return self.id is None


class PetType(NamedEntity):
    """Kind of animal (cat, dog, ...)."""

    class Meta:
        ordering = ['name']


class Pet(NamedEntity):
    birth_date = models.DateField(null=True, blank=True)
    type = models.ForeignKey(PetType, null=True, blank=True, on_delete=models.SET_NULL, related_name='pets')
    owner = models.ForeignKey(Owner, on_delete=models.CASCADE, related_name='pets')

    class Meta:
        ordering = ['name']


class Visit(models.Model):
    date = models.DateField()
    description = models.CharField(max_length=255)
    pet = models.ForeignKey(Pet, on_delete=models.CASCADE, related_name='visits')

    class Meta:
        ordering = ['date', 'id']

    def __str__(self) -> str:
        return f"{self.date}: {self.description}"


class Specialty(NamedEntity):
    """A veterinary specialty such as radiology or surgery."""

    class Meta:
        ordering = ['name']
        verbose_name_plural = 'specialties'


class Vet(Person):
    specialties = models.ManyToManyField(Specialty, blank=True, related_name='vets')

    class Meta:
        ordering = ['id']

    def sorted_specialties(self) -> list[Specialty]:
        return sorted(self.specialties.all(), key=lambda s: s.name or '')
