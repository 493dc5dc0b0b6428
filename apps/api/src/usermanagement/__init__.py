"""
User Management - server-rendered user sign-up.
"""

__version__ = "0.1.0"
