"""
shoplist: client-side state layer for a shared shopping-list manager.
"""

__version__ = "0.1.0"
