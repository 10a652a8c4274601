"""Signature algorithm registry and the ECDSA P-256 and P-384 algorithms."""