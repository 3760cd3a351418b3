"""
Basket Application Layer

Ports, context, DTOs and the basket controllers.
"""
