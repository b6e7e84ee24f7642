"""
Cryptography Layer - Key Management
Ed25519 key pairs for UTXO owners; an owner's address is its base64 public key
"""
import base64
import binascii

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

PUBLIC_KEY_SIZE = 32


def address_to_public_key_bytes(address: str) -> bytes:
    """Decode a base64 address into raw public key bytes.

    Raises ValueError when the address is not valid base64 or has the
    wrong length.
    """
    try:
        raw = base64.b64decode(address, validate=True)
    except (binascii.Error, TypeError) as e:
        raise ValueError(f"Address is not valid base64: {address!r}") from e
    if len(raw) != PUBLIC_KEY_SIZE:
        raise ValueError(f"Ed25519 public keys are {PUBLIC_KEY_SIZE} bytes, got {len(raw)}")
    return raw


class KeyPair:
    """Represents a public/private key pair for signing transaction inputs"""

    def __init__(self, private_key=None, seed: bytes = None):
        if private_key is not None and seed is not None:
            raise ValueError("Provide either an existing private_key or a seed, not both")

        if seed is not None:
            if len(seed) != 32:
                raise ValueError("Ed25519 seeds must be exactly 32 bytes")
            private_key = ed25519.Ed25519PrivateKey.from_private_bytes(seed)

        if private_key is None:
            private_key = ed25519.Ed25519PrivateKey.generate()

        self.private_key = private_key
        self.public_key = self.private_key.public_key()

    def sign(self, data: bytes) -> bytes:
        """Sign data with private key"""
        return self.private_key.sign(data)

    def get_public_key_bytes(self) -> bytes:
        """Get public key as bytes"""
        return self.public_key.public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw
        )

    def get_address(self) -> str:
        """Get address (base64 encoded public key)"""
        return base64.b64encode(self.get_public_key_bytes()).decode()

    @staticmethod
    def from_seed(seed: bytes) -> 'KeyPair':
        """Create deterministic keypair from 32-byte seed"""
        return KeyPair(seed=seed)

    @staticmethod
    def verify(public_key_bytes: bytes, signature: bytes, data: bytes) -> bool:
        """Verify signature against public key and data"""
        try:
            public_key = ed25519.Ed25519PublicKey.from_public_bytes(public_key_bytes)
            public_key.verify(signature, data)
        except (InvalidSignature, ValueError, TypeError):
            return False
        return True
