"""
Cryptography Layer - Hashing and Commitments
Deterministic digest of dictionaries, used to fingerprint pool contents
"""
import hashlib
import json
from typing import Any, Dict

def hash_dict_hex(data: Dict[str, Any]) -> str:
    """Return hex SHA-256 of a dictionary's sorted, compact JSON form"""
    json_str = json.dumps(data, sort_keys=True, separators=(',', ':'))
    return hashlib.sha256(json_str.encode('utf-8')).hexdigest()
