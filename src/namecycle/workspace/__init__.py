"""
In-memory workspace of open documents.
"""
