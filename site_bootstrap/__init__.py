"""
Site Builder Bootstrap

One-time MongoDB initialization: application database, application user,
seed collection and seed document.
"""

__version__ = "0.1.0"
