"""Domain entities package.

Usage:
    from passgate.domain.entities import PendingMutation, confirmation_field
"""

from passgate.domain.entities.pending_mutation import PendingMutation, confirmation_field

__all__ = ["PendingMutation", "confirmation_field"]
