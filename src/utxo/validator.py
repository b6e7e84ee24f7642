"""
Validation Layer - Transaction Validator
Checks a proposed transaction against the UTXO pool without mutating it
"""
import math

from crypto.signature import Ed25519Verifier, SignatureVerifier
from .canonical import build_canonical_data
from .config import DEFAULT_CONFIG, ValidatorConfig
from .errors import ValidationErrorKind, ValidationResult, create_validation_error
from .pool import UTXOPool
from .transaction import Transaction


def is_positive_amount(amount) -> bool:
    """True for finite, strictly positive int/float amounts"""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return False
    return math.isfinite(amount) and amount > 0


class Validator:
    """Validates transactions against a UTXO pool.

    Holds only a reference to the real pool. Each call works on its own
    clone, so concurrent calls are safe.

    An input whose UTXO is absent from the pool gets UTXO_NOT_FOUND and
    nothing else: there is no amount or recipient to check it against.
    """

    def __init__(self, utxo_pool: UTXOPool, verifier: SignatureVerifier = None,
                 config: ValidatorConfig = None):
        self.utxo_pool = utxo_pool
        self.verifier = verifier if verifier is not None else Ed25519Verifier()
        self.config = config if config is not None else DEFAULT_CONFIG

    def build_canonical_data(self, transaction: Transaction) -> bytes:
        return build_canonical_data(transaction)

    def validate_transaction(self, transaction: Transaction) -> ValidationResult:
        """
        Run every check and collect all failures.
        Never raises for a well-formed transaction and never touches the real pool.
        """
        errors = []
        encode_fault = ""
        temp_pool = self.utxo_pool.clone()
        try:
            tx_data = self.build_canonical_data(transaction)
        except (TypeError, ValueError) as e:
            # Nothing was signed over bytes that cannot be produced
            tx_data = None
            encode_fault = f" (payload not encodable: {e})"
        total_inputs = 0
        total_outputs = 0

        for tx_input in transaction.inputs:
            utxo_id = tx_input.utxo_id

            # Existence is checked against the real pool
            utxo = self.utxo_pool.get_utxo(utxo_id)
            if utxo is None:
                errors.append(create_validation_error(
                    ValidationErrorKind.UTXO_NOT_FOUND,
                    f"UTXO not found: {utxo_id}"
                ))
                continue

            # Spending is simulated on the clone
            first_use = temp_pool.remove_utxo(utxo_id)
            if not first_use:
                errors.append(create_validation_error(
                    ValidationErrorKind.DOUBLE_SPENDING,
                    f"UTXO referenced more than once: {utxo_id}"
                ))

            if not is_positive_amount(utxo.amount):
                errors.append(create_validation_error(
                    ValidationErrorKind.NEGATIVE_AMOUNT,
                    f"UTXO with non-positive amount: {utxo.amount} at {utxo_id}"
                ))
            elif first_use or self.config.count_duplicate_inputs:
                total_inputs += utxo.amount

            fault = self._check_signature(tx_data, tx_input.signature, utxo.recipient, encode_fault)
            if fault is not None:
                errors.append(create_validation_error(
                    ValidationErrorKind.INVALID_SIGNATURE,
                    f"Invalid signature for UTXO {utxo_id}{fault}"
                ))

        for output in transaction.outputs:
            if not is_positive_amount(output.amount):
                errors.append(create_validation_error(
                    ValidationErrorKind.NEGATIVE_AMOUNT,
                    f"Output with non-positive amount: {output.amount} to {output.recipient}"
                ))
            else:
                total_outputs += output.amount

        if total_inputs != total_outputs:
            errors.append(create_validation_error(
                ValidationErrorKind.AMOUNT_MISMATCH,
                f"Input total {total_inputs} does not match output total {total_outputs}"
            ))

        return ValidationResult.from_errors(errors)

    def _check_signature(self, tx_data, signature: bytes, public_key: str, encode_fault: str = ""):
        """None when the signature verifies, otherwise a message suffix.

        A verifier that raises instead of returning False is reported as an
        invalid signature naming the fault, so validation stays total.
        """
        if tx_data is None:
            return encode_fault
        try:
            ok = self.verifier.verify(tx_data, signature, public_key)
        except Exception as e:
            return f" (verifier error: {type(e).__name__}: {e})"
        return None if ok else ""
