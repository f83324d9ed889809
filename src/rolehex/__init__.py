"""RoleHex - role catalog for authorization.

Create, rename, delete, look up and search roles, with unique canonical
names and protected system roles.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
