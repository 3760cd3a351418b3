"""
Basket Domain

Assembles and prices the order in progress of a customer session.
"""
