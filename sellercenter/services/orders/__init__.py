"""
Order services package for the Seller Center orders API.

This package contains the parameter builders, the response mappers and
the OrderManager that ties them to the transport.
"""
