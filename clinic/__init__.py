"""Clinic application for the pet clinic project.

This package contains the models, controllers, repositories, views and
route registrations for managing owners, pets, visits and vets.
"""
