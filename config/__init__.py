"""
Configuration for Analisa Sentimen.
"""
