"""HTTP Message Signatures: structured field values and ECDSA signature algorithms."""

__version__ = "0.1.0"