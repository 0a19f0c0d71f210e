"""
Endpoint subpackage for API v4.

Each module defines an APIRouter for one catalog resource.  The
routers are aggregated in ``router.py`` at the package level.
"""
