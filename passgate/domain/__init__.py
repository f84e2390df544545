"""Domain layer: entities, value objects, validators and protocols (ports).

No infrastructure imports here; hashing and token backends are reached
through the protocols in ``passgate.domain.protocols``.
"""
