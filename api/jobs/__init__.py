"""
Jobs resource.
"""
