"""
Core - configuration, logging, errors and local storage engine
"""
