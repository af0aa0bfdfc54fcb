"""
Database models package.
"""

from jobboard.models.user import User
from jobboard.models.person import Person
from jobboard.models.listing import Listing
from jobboard.models.application import Application

__all__ = ["User", "Person", "Listing", "Application"]
