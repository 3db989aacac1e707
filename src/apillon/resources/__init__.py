"""
Thin wrappers for the non-storage Apillon resource collections.
"""

from .base import BaseResource
from .computing import Computing
from .hosting import Hosting
from .nfts import Nfts
from .smart_contracts import SmartContracts
from .social import Social

__all__ = [
    "BaseResource",
    "Computing",
    "Hosting",
    "Nfts",
    "SmartContracts",
    "Social",
]
