"""
Validation Layer - Configuration
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidatorConfig:
    # False: only the first occurrence of a duplicated input adds to the input
    # total. True: every occurrence is counted, which lets a duplicate inflate
    # the balance; kept for compatibility with older signed corpora.
    count_duplicate_inputs: bool = False
    # Default verbosity for the admission processor's logger.
    log_verbose: bool = False


DEFAULT_CONFIG = ValidatorConfig()
