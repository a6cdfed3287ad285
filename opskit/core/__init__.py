"""
Core layer for opskit: settings, models, interfaces, DI and exceptions.
"""
