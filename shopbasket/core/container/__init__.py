from .basket import BasketContainer

__all__ = ["BasketContainer"]
