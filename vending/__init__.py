from .machine import VendingMachine

__all__ = ["VendingMachine"]
