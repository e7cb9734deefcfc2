"""
Node identity derivation.
"""

from logweave.context.identity.node_identifier import (
    IdentityTranslator,
    NameObservation,
    node_identifier,
)

__all__ = ['IdentityTranslator', 'NameObservation', 'node_identifier']
