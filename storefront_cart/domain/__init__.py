"""
Domain Layer

Value objects, entities and repository contracts for the cart.
Nothing in here performs I/O.
"""
