"""Device and warranty registry: passports, devices and renovation history.

The package is organised the same way top to bottom:

* ``core`` holds configuration, logging, the error taxonomy and serial helpers.
* ``db`` owns the SQLAlchemy engine, session factory and declarative base.
* ``models`` are the tables; ``schemas`` are the pydantic request/response shapes.
* ``crud`` modules are thin stores over a ``Session``.
* ``services`` hold the business rules and are what callers use.
"""

__version__ = "0.1.0"
