"""
Domain layer for the Seller Center SDK.

This layer contains the records returned by the API, the value objects
used to build requests and the fixed enumerations the API accepts.
"""
