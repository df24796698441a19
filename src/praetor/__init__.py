"""Praetor access core - permission catalog, roles and directory provisioning."""

__version__ = "0.1.0"
