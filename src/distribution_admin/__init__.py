"""Distribution admin dashboard.

This package is organized by feature modules (attendance, employees, users, catalog)
with a thin Flask controller layer over services that talk to the external REST backend.
"""
