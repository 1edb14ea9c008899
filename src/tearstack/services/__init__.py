"""Service layer — the tear-down stack and its registration contract.

Services may import from the domain and config layers.
They must never import from integration or testing.
"""
