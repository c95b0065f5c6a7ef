"""
Link Registry Module.

Button links stored in Data.json: create, resolve by key, search by name.
"""
