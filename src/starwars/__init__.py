"""
Star Wars GraphQL server
Sample GraphQL server over a stitched schema with claim-based authorization
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
