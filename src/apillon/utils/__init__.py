"""
Configuration, logging and validation helpers.
"""
