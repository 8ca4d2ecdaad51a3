"""
Companies resource.
"""
