"""
Admission Layer - Transaction Processor
Validates transactions and applies accepted ones to the real UTXO pool
"""
from typing import Iterable, List, Optional, Tuple

from .config import DEFAULT_CONFIG, ValidatorConfig
from .errors import UTXOPoolError, ValidationResult
from .logger import Logger
from .pool import UTXOPool
from .transaction import UTXO, Transaction
from .validator import Validator


class TransactionProcessor:
    """Admits transactions into the pending list, spending their inputs"""

    def __init__(self, utxo_pool: UTXOPool, validator: Validator = None,
                 logger: Logger = None, config: ValidatorConfig = None):
        self.config = config if config is not None else DEFAULT_CONFIG
        self.utxo_pool = utxo_pool
        self.validator = validator if validator is not None else Validator(utxo_pool, config=self.config)
        self.logger = logger if logger is not None else Logger("processor", self.config.log_verbose)
        self.pending: List[Transaction] = []

    def submit_transaction(self, tx: Transaction) -> ValidationResult:
        """
        Validate tx and, if valid, spend its inputs and create its outputs.
        Returns the validation result; the pool is untouched on rejection.
        """
        result = self.validator.validate_transaction(tx)
        if not result.valid:
            self._log_rejection(tx, result)
            return result

        with self.utxo_pool.lock:
            # Another submission may have spent an input since the first pass
            result = self.validator.validate_transaction(tx)
            if not result.valid:
                self._log_rejection(tx, result)
                return result
            self._apply(tx)

        self.pending.append(tx)
        self.logger.log("TX",
                        f"Transaction {tx.id[:16]} accepted: {len(tx.inputs)} inputs, "
                        f"{len(tx.outputs)} outputs")
        return result

    def submit_transactions(self, transactions: Iterable[Transaction]) -> Tuple[List[str], List[Optional[ValidationResult]]]:
        """
        Submit transactions in order
        Returns (ids of accepted transactions, result for each transaction).
        The result is None for a valid transaction whose outputs collide with
        existing UTXOs and so could not be applied.
        """
        accepted = []
        results = []
        for tx in transactions:
            try:
                result = self.submit_transaction(tx)
            except UTXOPoolError as e:
                self.logger.log("REJECT", f"Transaction {tx.id[:16]} not applied: {e}")
                results.append(None)
                continue
            results.append(result)
            if result.valid:
                accepted.append(tx.id)
            # Rejected transactions do not stop the batch
        return accepted, results

    def clear_pending(self):
        """Drop the pending list (e.g. after the caller commits it)"""
        self.pending = []

    def _apply(self, tx: Transaction):
        # Checked up front so a reused transaction id cannot leave a half-applied spend.
        # Ids this transaction spends are freed before its outputs are added.
        spent = {tx_input.utxo_id for tx_input in tx.inputs}
        for utxo_id in tx.output_ids():
            if utxo_id not in spent and self.utxo_pool.has_utxo(utxo_id):
                raise UTXOPoolError(f"Output {utxo_id} already exists; transaction id reused")
        for tx_input in tx.inputs:
            self.utxo_pool.remove_utxo(tx_input.utxo_id)
        for utxo_id, output in zip(tx.output_ids(), tx.outputs):
            self.utxo_pool.add_utxo(utxo_id, UTXO(amount=output.amount, recipient=output.recipient))

    def _log_rejection(self, tx: Transaction, result: ValidationResult):
        kinds = ", ".join(kind.value for kind in result.kinds)
        self.logger.log("REJECT", f"Transaction {tx.id[:16]} rejected: {kinds}")
