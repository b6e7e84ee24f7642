"""
Validation Layer - Transactions
UTXO references, inputs, outputs and producer-side signing helpers
"""
import dataclasses
import time
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

from crypto.keys import KeyPair
from .canonical import build_canonical_data
from .errors import TransactionError

Amount = Union[int, float]


@dataclass(frozen=True)
class UTXOId:
    """Address of one output: (producing transaction id, output index)"""
    tx_id: str
    output_index: int

    def __str__(self) -> str:
        return f"{self.tx_id}:{self.output_index}"


@dataclass(frozen=True)
class UTXO:
    amount: Amount
    recipient: str

    def to_dict(self):
        return {"amount": self.amount, "recipient": self.recipient}


@dataclass(frozen=True)
class TransactionInput:
    utxo_id: UTXOId
    owner: str
    signature: bytes = b""


@dataclass(frozen=True)
class TransactionOutput:
    amount: Amount
    recipient: str


@dataclass(frozen=True)
class Transaction:
    """A proposed spend of existing UTXOs into new outputs"""
    id: str
    inputs: Tuple[TransactionInput, ...]
    outputs: Tuple[TransactionOutput, ...]
    timestamp: Amount

    @classmethod
    def create(cls, id: str, inputs: Iterable[TransactionInput],
               outputs: Iterable[TransactionOutput],
               timestamp: Optional[Amount] = None) -> 'Transaction':
        if timestamp is None:
            timestamp = int(time.time())
        return cls(id=id, inputs=tuple(inputs), outputs=tuple(outputs), timestamp=timestamp)

    def signing_bytes(self) -> bytes:
        return build_canonical_data(self)

    def sign_input(self, index: int, keypair: KeyPair) -> 'Transaction':
        """Return a copy with input `index` signed by keypair.

        The canonical payload does not cover signatures, so inputs can be
        signed in any order without invalidating each other.
        """
        if not 0 <= index < len(self.inputs):
            raise TransactionError(f"Input index {index} out of range for {len(self.inputs)} inputs")
        signature = keypair.sign(self.signing_bytes())
        inputs = list(self.inputs)
        inputs[index] = dataclasses.replace(inputs[index], signature=signature)
        return dataclasses.replace(self, inputs=tuple(inputs))

    def sign_all(self, keypairs: Sequence[KeyPair]) -> 'Transaction':
        """Sign every input with the keypair at the same position"""
        if len(keypairs) != len(self.inputs):
            raise TransactionError(
                f"Expected {len(self.inputs)} keypairs, got {len(keypairs)}")
        payload = self.signing_bytes()
        inputs = tuple(
            dataclasses.replace(tx_input, signature=keypair.sign(payload))
            for tx_input, keypair in zip(self.inputs, keypairs)
        )
        return dataclasses.replace(self, inputs=inputs)

    def output_ids(self) -> Tuple[UTXOId, ...]:
        """Identifiers the outputs will have once the transaction is applied"""
        return tuple(UTXOId(self.id, index) for index in range(len(self.outputs)))
