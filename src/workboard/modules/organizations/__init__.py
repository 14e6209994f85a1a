"""Organizations module - the tenant directory.

Organizations are created only through registration, so this module
exposes no routes of its own.
"""
