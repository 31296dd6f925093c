"""
Application Layer

Use cases that orchestrate the cart domain and its collaborators.
"""
