"""
Validation Layer - Canonical Signing Payload

The payload every input signature covers. Signatures are excluded; the
claimed owner of each input and all outputs are included verbatim. Signer
and validator must produce identical bytes, so any layout change has to bump
crypto.signature.CANONICAL_VERSION.
"""
from typing import Any, Dict

from crypto.signature import DOMAIN_TX, canonical_bytes


def transaction_signing_dict(transaction) -> Dict[str, Any]:
    """Signature-free view of a transaction"""
    return {
        "id": transaction.id,
        "inputs": [
            {
                "utxo_id": {
                    "tx_id": tx_input.utxo_id.tx_id,
                    "output_index": tx_input.utxo_id.output_index
                },
                "owner": tx_input.owner
            }
            for tx_input in transaction.inputs
        ],
        "outputs": [
            {"amount": output.amount, "recipient": output.recipient}
            for output in transaction.outputs
        ],
        "timestamp": transaction.timestamp
    }


def build_canonical_data(transaction) -> bytes:
    """Deterministic bytes signed by each input owner"""
    return canonical_bytes(DOMAIN_TX, transaction_signing_dict(transaction))
