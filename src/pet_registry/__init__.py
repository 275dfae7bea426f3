"""Pet registry service.

Owns the ``pet`` table: a generated integer identifier and a required type
label. Persistence is handled by SQLModel/SQLAlchemy; this package supplies
the mapping, a repository, configuration, an HTTP adapter and a CLI.
"""

__version__ = "0.1.0"
