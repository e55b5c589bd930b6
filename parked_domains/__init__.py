# parked_domains/__init__.py
"""
ParkedDomains package initializer.
Defines the package version; the CLI lives in :mod:`parked_domains.cli`.
"""
__version__ = "0.1.0"
