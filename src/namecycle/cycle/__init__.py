"""
Same-name cycling: digest, grouping, circular navigation and the
advance/retreat entry points.
"""
