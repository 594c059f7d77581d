"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from witquery.models.extension_document import ExtensionDocument  # noqa: F401
