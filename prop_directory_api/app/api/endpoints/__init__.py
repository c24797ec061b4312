"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
domain (firms, reviews, resources, auth).  The routers are aggregated
in ``router.py`` at the package level.
"""
