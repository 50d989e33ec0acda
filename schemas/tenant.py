# schemas/tenant.py
from typing import List

from .profile import TenantResponse
from .property import PropertyResponse


class TenantWithFavorites(TenantResponse):
     """Tenant profile including bookmarked properties."""
     favorites: List[PropertyResponse] = []
