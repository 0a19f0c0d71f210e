"""
Application package initializer.

The application is organised into layers: ``api`` holds versioned
routers, ``services`` the business logic, ``stores`` the persistence
backends, ``schemas`` the resource models and ``core`` configuration,
logging and store wiring.
"""

from .main import app  # noqa: F401
