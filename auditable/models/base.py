"""
Base model.

Every tracked model and the audit table inherit from Base.
Engines and sessions belong to the application: services
here take a Session and leave the transaction boundary
to the caller.
"""

from sqlalchemy.orm import DeclarativeBase


# --- Base Model Class ---
# SQLAlchemy uses it to track all models; the entity
# registry reads the mapped classes from it as well.
class Base(DeclarativeBase):
    pass
