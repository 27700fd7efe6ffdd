"""
Command line interface for namecycle.
"""
