"""
Basket Domain Layer

Entities, value objects, domain services and exceptions of the basket.
"""
