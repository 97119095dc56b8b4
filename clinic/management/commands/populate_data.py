"""
Management command to populate the database with sample clinic data.
"""
from datetime import date

from django.core.management.base import BaseCommand
from django.db import transaction

from clinic.models import Owner, Pet, PetType, Specialty, Vet, Visit

VETS = [
    ('James', 'Carter', []),
    ('Helen', 'Leary', ['radiology']),
    ('Linda', 'Douglas', ['surgery', 'dentistry']),
    ('Rafael', 'Ortega', ['surgery']),
    ('Henry', 'Stevens', ['radiology']),
    ('Sharon', 'Jenkins', []),
]

PET_TYPES = ['cat', 'dog', 'lizard', 'snake', 'bird', 'hamster']

OWNERS = [
    ('George', 'Franklin', '110 W. Liberty St.', 'Madison', '6085551023', [('Leo', '2010-09-07', 'cat')]),
    ('Betty', 'Davis', '638 Cardinal Ave.', 'Sun Prairie', '6085551749', [('Basil', '2012-08-06', 'hamster')]),
    ('Eduardo', 'Rodriquez', '2693 Commerce St.', 'McFarland', '6085558763',
     [('Rosy', '2011-04-17', 'dog'), ('Jewel', '2010-03-07', 'dog')]),
    ('Harold', 'Davis', '563 Friendly St.', 'Windsor', '6085553198', [('Iggy', '2010-11-30', 'lizard')]),
    ('Peter', 'McTavish', '2387 S. Fair Way', 'Madison', '6085552765', [('George', '2010-01-20', 'snake')]),
    ('Jean', 'Coleman', '105 N. Lake St.', 'Monona', '6085552654',
     [('Samantha', '2012-09-04', 'cat'), ('Max', '2012-09-04', 'cat')]),
    ('Jeff', 'Black', '1450 Oak Blvd.', 'Monona', '6085555387', [('Lucky', '2011-08-06', 'bird')]),
    ('Maria', 'Escobito', '345 Maple St.', 'Madison', '6085557683', [('Mulligan', '2007-02-24', 'dog')]),
    ('David', 'Schroeder', '2749 Blackhawk Trail', 'Madison', '6085559435', [('Freddy', '2010-03-09', 'bird')]),
    ('Carlos', 'Estaban', '2335 Independence La.', 'Waunakee', '6085555487',
     [('Lucky', '2010-06-24', 'dog'), ('Sly', '2012-06-08', 'cat')]),
]

VISITS = [
    ('Samantha', '2013-01-01', 'rabies shot'),
    ('Max', '2013-01-02', 'rabies shot'),
    ('Max', '2013-01-03', 'neutered'),
    ('Samantha', '2013-01-04', 'spayed'),
]


class Command(BaseCommand):
    help = 'Populate database with sample owners, pets, visits and vets'

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write('Creating sample data...')
        specialties = self.create_specialties()
        self.create_vets(specialties)
        pet_types = self.create_pet_types()
        pets = self.create_owners(pet_types)
        self.create_visits(pets)
        self.stdout.write(self.style.SUCCESS('Sample data created.'))

    def create_specialties(self):
        specialties = {}
        for name in ('radiology', 'surgery', 'dentistry'):
            specialties[name], _ = Specialty.objects.get_or_create(name=name)
        return specialties

    def create_vets(self, specialties):
        for first_name, last_name, names in VETS:
            vet, created = Vet.objects.get_or_create(first_name=first_name, last_name=last_name)
            if created:
                vet.specialties.set([specialties[n] for n in names])
            self.stdout.write(f'vet: {vet}')

    def create_pet_types(self):
        pet_types = {}
        for name in PET_TYPES:
            pet_types[name], _ = PetType.objects.get_or_create(name=name)
        return pet_types

    def create_owners(self, pet_types):
        pets = {}
        for first_name, last_name, address, city, telephone, owned in OWNERS:
            owner, _ = Owner.objects.get_or_create(
                first_name=first_name,
                last_name=last_name,
                defaults={'address': address, 'city': city, 'telephone': telephone},
            )
            for name, birth_date, type_name in owned:
                pet, _ = Pet.objects.get_or_create(
                    owner=owner,
                    name=name,
                    defaults={'birth_date': date.fromisoformat(birth_date), 'type': pet_types[type_name]},
                )
                pets.setdefault(name, pet)
            self.stdout.write(f'owner: {owner}')
        return pets

    def create_visits(self, pets):
        for pet_name, visit_date, description in VISITS:
            Visit.objects.get_or_create(
                pet=pets[pet_name],
                date=date.fromisoformat(visit_date),
                description=description,
            )
