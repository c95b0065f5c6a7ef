"""
Analisa Sentimen.

Review sentiment dashboard and button-link tooling.
"""

__version__ = "1.0.0"
