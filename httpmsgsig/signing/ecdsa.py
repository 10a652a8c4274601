"""ECDSA signature algorithms over the P-256 and P-384 curves."""

from __future__ import annotations

from typing import Any, ClassVar, Type

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from .algorithm import Algorithm, AlgorithmError, register_algorithm


class _EcdsaAlgorithm(Algorithm):
    """Shared ECDSA logic; signatures are ASN.1 DER encoded (r, s) pairs."""

    curve_type: ClassVar[Type[ec.EllipticCurve]]
    curve_label: ClassVar[str]
    hash_type: ClassVar[Type[hashes.HashAlgorithm]]

    def _check_curve(self, key: Any) -> None:
        if not isinstance(key.curve, self.curve_type):
            raise AlgorithmError(
                f"ECDSA key must use {self.curve_label} curve for {self.id}, "
                f"got {key.curve.name}"
            )

    def _sign(self, signature_base: bytes, key: Any) -> bytes:
        if not signature_base:
            raise AlgorithmError("signature base cannot be empty")
        if key is None:
            raise AlgorithmError("ECDSA private key is missing")
        if not isinstance(key, ec.EllipticCurvePrivateKey):
            raise AlgorithmError(
                f"key must be an EllipticCurvePrivateKey for {self.id}, "
                f"got {type(key).__name__}"
            )
        self._check_curve(key)
        try:
            return key.sign(bytes(signature_base), ec.ECDSA(self.hash_type()))
        except (ValueError, TypeError) as exc:
            raise AlgorithmError(f"failed to sign with {self.id}: {exc}") from exc

    def _verify(self, signature_base: bytes, signature: bytes, key: Any) -> None:
        if not signature_base:
            raise AlgorithmError("signature base cannot be empty")
        if not signature:
            raise AlgorithmError("signature cannot be empty")
        if key is None:
            raise AlgorithmError("ECDSA public key is missing")
        if not isinstance(key, ec.EllipticCurvePublicKey):
            raise AlgorithmError(
                f"key must be an EllipticCurvePublicKey for {self.id}, "
                f"got {type(key).__name__}"
            )
        self._check_curve(key)
        try:
            key.verify(bytes(signature), bytes(signature_base), ec.ECDSA(self.hash_type()))
        except (InvalidSignature, ValueError) as exc:
            raise AlgorithmError(f"{self.id} signature verification failed") from exc


class EcdsaP256Sha256(_EcdsaAlgorithm):
    """ECDSA over curve P-256 with SHA-256 (``ecdsa-p256-sha256``)."""

    id = "ecdsa-p256-sha256"
    curve_type = ec.SECP256R1
    curve_label = "P-256"
    hash_type = hashes.SHA256

    def sign(self, signature_base: bytes, key: Any) -> bytes:
        """Sign with a P-256 private key; returns a DER-encoded signature."""
        return self._sign(signature_base, key)

    def verify(self, signature_base: bytes, signature: bytes, key: Any) -> None:
        """Check a DER-encoded signature against a P-256 public key."""
        self._verify(signature_base, signature, key)


class EcdsaP384Sha384(_EcdsaAlgorithm):
    """ECDSA over curve P-384 with SHA-384 (``ecdsa-p384-sha384``)."""

    id = "ecdsa-p384-sha384"
    curve_type = ec.SECP384R1
    curve_label = "P-384"
    hash_type = hashes.SHA384

    def sign(self, signature_base: bytes, key: Any) -> bytes:
        """Sign with a P-384 private key; returns a DER-encoded signature."""
        return self._sign(signature_base, key)

    def verify(self, signature_base: bytes, signature: bytes, key: Any) -> None:
        """Check a DER-encoded signature against a P-384 public key."""
        self._verify(signature_base, signature, key)


register_algorithm(EcdsaP256Sha256())
register_algorithm(EcdsaP384Sha384())