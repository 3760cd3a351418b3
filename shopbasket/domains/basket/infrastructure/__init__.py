"""
Basket Infrastructure Layer

Adapters for sessions, message queues and the order store.
"""
