"""
Validation of Mexican personal and geographic identifiers
"""

VERSION = "0.1.0"
