"""
dartpkg-info - print published metadata for Dart packages.
"""

__version__ = "0.1.0"
