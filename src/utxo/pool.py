"""
Validation Layer - UTXO Pool
In-memory set of unspent outputs keyed by UTXOId
"""
import threading
from typing import Dict, List, Mapping, Optional, Tuple

from crypto.hashing import hash_dict_hex
from .errors import UTXOPoolError
from .transaction import UTXO, UTXOId


class UTXOPool:
    """Mapping from UTXOId to UTXO.

    Every operation holds the pool lock, so clone() is a consistent snapshot
    even while another thread spends or adds outputs. `lock` is exposed for
    callers that need several operations to happen atomically.
    """

    def __init__(self, initial_utxos: Mapping[UTXOId, UTXO] = None):
        self.lock = threading.RLock()
        self._utxos: Dict[UTXOId, UTXO] = dict(initial_utxos or {})

    def get_utxo(self, utxo_id: UTXOId) -> Optional[UTXO]:
        with self.lock:
            return self._utxos.get(utxo_id)

    def has_utxo(self, utxo_id: UTXOId) -> bool:
        with self.lock:
            return utxo_id in self._utxos

    def add_utxo(self, utxo_id: UTXOId, utxo: UTXO):
        with self.lock:
            if utxo_id in self._utxos:
                raise UTXOPoolError(f"UTXO already exists: {utxo_id}")
            self._utxos[utxo_id] = utxo

    def remove_utxo(self, utxo_id: UTXOId) -> bool:
        """Remove an entry; False if it was already absent"""
        with self.lock:
            return self._utxos.pop(utxo_id, None) is not None

    def clone(self) -> 'UTXOPool':
        """Independent snapshot; mutating it never touches this pool"""
        with self.lock:
            # UTXO and UTXOId are frozen, so a shallow copy is enough
            return UTXOPool(self._utxos)

    def get_balance(self, address: str):
        """Sum of amounts owned by address"""
        with self.lock:
            return sum(utxo.amount for utxo in self._utxos.values() if utxo.recipient == address)

    def utxos_for(self, address: str) -> List[Tuple[UTXOId, UTXO]]:
        with self.lock:
            return sorted(
                ((utxo_id, utxo) for utxo_id, utxo in self._utxos.items()
                 if utxo.recipient == address),
                key=lambda item: (item[0].tx_id, item[0].output_index)
            )

    def to_dict(self) -> Dict[str, Dict]:
        """Convert to dictionary keyed by 'tx_id:index'"""
        with self.lock:
            return {str(utxo_id): utxo.to_dict() for utxo_id, utxo in self._utxos.items()}

    def get_hash(self) -> str:
        """Get deterministic hash of pool contents"""
        return hash_dict_hex(self.to_dict())

    def __len__(self) -> int:
        with self.lock:
            return len(self._utxos)

    def __contains__(self, utxo_id) -> bool:
        return self.has_utxo(utxo_id)
