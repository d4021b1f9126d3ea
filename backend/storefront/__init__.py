"""
Storefront data layer

Actions are dispatched to Stores, which fetch from the storefront REST API
through Remotes and Mappers and reconcile the results into local storage.

Author: TM3
Date: 2026-10-19
"""
__version__ = "0.1.0"
