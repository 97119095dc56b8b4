"""Django project package for the pet clinic web application."""
