"""
Cryptography Layer - Signature Verification with Domain Separation
Canonical signing bytes and the verifier predicate used by the validator
"""
import json
from typing import Any, Dict

from .keys import KeyPair, address_to_public_key_bytes

# Bump whenever the canonical layout changes; signer and verifier must agree.
CANONICAL_VERSION = 1

DOMAIN_TX = "TX"


def canonical_bytes(domain: str, data: Dict[str, Any], version: int = CANONICAL_VERSION) -> bytes:
    """Get deterministic bytes for signing with domain separation"""
    message_dict = {
        "domain": domain,
        "version": version,
        "data": data
    }
    # Sorted keys, no whitespace. NaN/Infinity are emitted rather than rejected.
    json_str = json.dumps(message_dict, sort_keys=True, separators=(',', ':'))
    return json_str.encode('utf-8')


class SignatureVerifier:
    """Predicate over (payload, signature, public key)"""

    def verify(self, payload: bytes, signature: bytes, public_key: str) -> bool:
        raise NotImplementedError


class Ed25519Verifier(SignatureVerifier):
    """Verifies Ed25519 signatures where the public key is a base64 address"""

    def verify(self, payload: bytes, signature: bytes, public_key: str) -> bool:
        if not signature:
            return False
        try:
            public_key_bytes = address_to_public_key_bytes(public_key)
        except ValueError:
            return False
        return KeyPair.verify(public_key_bytes, signature, payload)
