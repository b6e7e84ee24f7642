"""Crypto layer initialization"""
from .keys import KeyPair
from .signature import SignatureVerifier, Ed25519Verifier, canonical_bytes
from .hashing import hash_dict_hex

__all__ = ['KeyPair', 'SignatureVerifier', 'Ed25519Verifier', 'canonical_bytes', 'hash_dict_hex']
