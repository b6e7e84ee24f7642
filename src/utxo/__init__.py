"""UTXO validation layer initialization"""
from .config import ValidatorConfig, DEFAULT_CONFIG
from .errors import (UTXOError, UTXOPoolError, TransactionError, ValidationErrorKind,
                     ValidationError, ValidationResult, create_validation_error)
from .transaction import UTXOId, UTXO, TransactionInput, TransactionOutput, Transaction
from .canonical import build_canonical_data
from .pool import UTXOPool
from .validator import Validator
from .logger import Logger
from .processor import TransactionProcessor

__all__ = ['ValidatorConfig', 'DEFAULT_CONFIG',
           'UTXOError', 'UTXOPoolError', 'TransactionError', 'ValidationErrorKind',
           'ValidationError', 'ValidationResult', 'create_validation_error',
           'UTXOId', 'UTXO', 'TransactionInput', 'TransactionOutput', 'Transaction',
           'build_canonical_data', 'UTXOPool', 'Validator', 'Logger', 'TransactionProcessor']
