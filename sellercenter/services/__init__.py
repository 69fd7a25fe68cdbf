"""
Service layer of the Seller Center SDK.
"""
