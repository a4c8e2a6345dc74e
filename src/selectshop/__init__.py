"""SelectShop API.

Bookmark external product listings, group them into per-user folders and
read them back over a small JSON API.
"""

__version__ = "0.1.0"
