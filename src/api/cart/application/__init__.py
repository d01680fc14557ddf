"""Cart application layer."""

from cart.application.reconciler import CartReconciler

__all__ = ["CartReconciler"]
