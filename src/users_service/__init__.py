"""Users service.

A small FastAPI service managing a single User resource (name and phone)
on top of SQLModel, with phone uniqueness enforced by the user service.
"""

__version__ = "0.1.0"
