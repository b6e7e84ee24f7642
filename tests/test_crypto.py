"""
Unit Tests for Cryptography Layer
Tests key generation, signing, verification, canonical bytes and hashing
"""
import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from crypto.keys import KeyPair, address_to_public_key_bytes
from crypto.signature import Ed25519Verifier, canonical_bytes, CANONICAL_VERSION
from crypto.hashing import hash_dict_hex
import base64


def _crypto_diagnostics(label: str, **kwargs):
    """Print helpful diagnostics for crypto tests.

    Accepts keyword arguments for items to display (keys, signatures, hashes).
    """
    print("\n" + "#" * 60)
    print(f"CRYPTO DIAGNOSTICS: {label}")
    print("#" * 60)
    if kwargs.get("keypair") is not None:
        kp = kwargs["keypair"]
        pub = kp.get_public_key_bytes()
        print(f" public_key_len: {len(pub)} bytes")
        print(f" address: {kp.get_address()}")

    if kwargs.get("signature") is not None:
        sig = kwargs["signature"]
        print(f" signature (base64): {base64.b64encode(sig).decode()}")
        print(f" signature_len: {len(sig)} bytes")

    if kwargs.get("hashes"):
        for k, v in kwargs["hashes"].items():
            print(f" {k}: {v}")

    for k, v in kwargs.items():
        if k in ("keypair", "signature", "hashes"):
            continue
        print(f" {k}: {v}")


def test_keypair_generation():
    """Test that keypairs are generated correctly"""
    print("\nTEST: KeyPair Generation")

    keypair1 = KeyPair()
    keypair2 = KeyPair()

    assert keypair1.get_address() != keypair2.get_address(), \
        "Two keypairs generated the same address"

    decoded = base64.b64decode(keypair1.get_address())
    assert len(decoded) == 32, "Public key should be 32 bytes"
    assert address_to_public_key_bytes(keypair1.get_address()) == keypair1.get_public_key_bytes()
    _crypto_diagnostics("keypair_generation", keypair=keypair1)

    print("PASSED: KeyPair generation works correctly")

def test_seeded_keypair_is_deterministic():
    """Test that a seed always yields the same address"""
    print("\nTEST: Seeded KeyPair")

    seed = bytes(range(32))
    assert KeyPair.from_seed(seed).get_address() == KeyPair.from_seed(seed).get_address()

    try:
        KeyPair(seed=b"short")
        raise AssertionError("Short seed accepted")
    except ValueError:
        pass

    print("PASSED: Seeded keypairs are deterministic")

def test_signature_verification():
    """Test signing and verification"""
    print("\nTEST: Signature Verification")

    keypair = KeyPair()
    message = b"spend tx0:0"
    signature = keypair.sign(message)

    assert KeyPair.verify(keypair.get_public_key_bytes(), signature, message), \
        "Valid signature was rejected"
    assert not KeyPair.verify(keypair.get_public_key_bytes(), signature, b"spend tx0:1"), \
        "Invalid signature was accepted (wrong message)"
    other_keypair = KeyPair()
    assert not KeyPair.verify(other_keypair.get_public_key_bytes(), signature, message), \
        "Invalid signature was accepted (wrong key)"
    _crypto_diagnostics("signature_verification", keypair=keypair, signature=signature)

    print("PASSED: Signature verification works correctly")

def test_verifier_uses_address():
    """Test the verifier predicate with base64 addresses"""
    print("\nTEST: Ed25519 Verifier")

    verifier = Ed25519Verifier()
    keypair = KeyPair()
    payload = b'{"domain":"TX"}'
    signature = keypair.sign(payload)

    assert verifier.verify(payload, signature, keypair.get_address())
    assert not verifier.verify(payload, signature, KeyPair().get_address())
    assert not verifier.verify(payload + b" ", signature, keypair.get_address())

    print("PASSED: Verifier accepts only matching address and payload")

def test_verifier_rejects_malformed_inputs():
    """Malformed keys or signatures yield False rather than raising"""
    print("\nTEST: Verifier Malformed Inputs")

    verifier = Ed25519Verifier()
    keypair = KeyPair()
    payload = b"payload"
    signature = keypair.sign(payload)

    assert not verifier.verify(payload, signature, "not base64!!")
    assert not verifier.verify(payload, signature, base64.b64encode(b"short").decode())
    assert not verifier.verify(payload, b"", keypair.get_address())
    assert not verifier.verify(payload, b"\x00" * 10, keypair.get_address())
    assert not verifier.verify(payload, signature, None)
    _crypto_diagnostics("malformed_inputs", keypair=keypair, signature=signature)

    print("PASSED: Malformed inputs are rejected without faults")

def test_canonical_bytes_layout():
    """Test the canonical envelope encoding"""
    print("\nTEST: Canonical Bytes Layout")

    data = {"b": 2, "a": [1, {"y": 1, "x": 0}]}
    encoded = canonical_bytes("TX", data)

    assert encoded == b'{"data":{"a":[1,{"x":0,"y":1}],"b":2},"domain":"TX","version":1}', encoded
    assert CANONICAL_VERSION == 1
    assert canonical_bytes("TX", {"a": [1, {"x": 0, "y": 1}], "b": 2}) == encoded, \
        "Key order changed the canonical bytes"

    print("PASSED: Canonical bytes are sorted and compact")

def test_domain_and_version_separation():
    """Signatures over one domain/version do not verify under another"""
    print("\nTEST: Domain Separation")

    keypair = KeyPair()
    verifier = Ed25519Verifier()
    data = {"value": 42}

    tx_bytes = canonical_bytes("TX", data)
    signature = keypair.sign(tx_bytes)

    assert verifier.verify(tx_bytes, signature, keypair.get_address())
    assert not verifier.verify(canonical_bytes("OTHER", data), signature, keypair.get_address()), \
        "Signature was reused across different domains"
    assert not verifier.verify(canonical_bytes("TX", data, version=2), signature, keypair.get_address()), \
        "Signature was reused across canonical versions"

    print("PASSED: Domain and version separate signatures")

def test_deterministic_hashing():
    """Test that hashing is deterministic"""
    print("\nTEST: Deterministic Hashing")

    data = {"tx0:0": {"amount": 10, "recipient": "alice"}, "tx0:1": {"amount": 5, "recipient": "bob"}}
    hash1 = hash_dict_hex(data)
    hash2 = hash_dict_hex(dict(reversed(list(data.items()))))
    assert hash1 == hash2, "Key reordering produced different hash"

    modified = dict(data)
    modified["tx0:1"] = {"amount": 6, "recipient": "bob"}
    hash3 = hash_dict_hex(modified)
    assert hash1 != hash3, "Different data produced same hash"

    assert len(hash1) == 64, "Expected a hex SHA-256 digest"
    _crypto_diagnostics("deterministic_hashing", hashes={"hash1": hash1, "hash3": hash3})

    print("PASSED: Hashing is deterministic")

def run_all_crypto_tests():
    """Run all cryptography tests"""
    print("\n" + "="*80)
    print("RUNNING CRYPTOGRAPHY UNIT TESTS")
    print("="*80)

    tests = [
        test_keypair_generation,
        test_seeded_keypair_is_deterministic,
        test_signature_verification,
        test_verifier_uses_address,
        test_verifier_rejects_malformed_inputs,
        test_canonical_bytes_layout,
        test_domain_and_version_separation,
        test_deterministic_hashing
    ]

    results = []
    for test_func in tests:
        try:
            test_func()
            results.append((test_func.__name__, True))
        except Exception as e:
            print(f"FAILED: {e}")
            import traceback
            traceback.print_exc()
            results.append((test_func.__name__, False))

    print("\n" + "="*80)
    print("CRYPTOGRAPHY TEST SUMMARY")
    print("="*80)

    for name, result in results:
        status = "PASSED" if result else "FAILED"
        print(f"{status}: {name}")

    if all(r for _, r in results):
        print("\nALL CRYPTOGRAPHY TESTS PASSED!")
        return 0
    else:
        print("\nSOME TESTS FAILED")
        return 1

if __name__ == "__main__":
    exit_code = run_all_crypto_tests()
    sys.exit(exit_code)
