"""
Converter service: HTTP surface over the radix_core conversion engine and history.
"""
