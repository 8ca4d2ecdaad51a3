"""
Token issuance and route guards.
"""
