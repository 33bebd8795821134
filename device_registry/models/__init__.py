# Importing the models registers them with ``Base.metadata``.
from .device import Device, Renovation
from .passport import Passport
from .user import User, UserRole

__all__ = ["Device", "Passport", "Renovation", "User", "UserRole"]
