"""
Exposes the version of wktsketch
"""

__version__ = 'v0.1.0'
