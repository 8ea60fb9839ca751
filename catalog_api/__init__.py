"""Product catalog API.

CRUD service over a product/category catalog with deterministic
product code generation.
"""

__version__ = "0.1.0"
