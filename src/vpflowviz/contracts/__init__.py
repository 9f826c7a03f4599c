"""Pipeline contracts - fail-fast enforcement of stage invariants.

This package enforces semantic guarantees between pipeline stages.
Contracts fail immediately and loudly when pipeline stages don't produce
their promised invariants.

Key principle:
- Pydantic validates config correctness
- Contracts validate pipeline correctness
- InputParseError reports bad input files
"""

from vpflowviz.contracts.failure import ContractViolation, InputParseError
from vpflowviz.contracts.base import require
from vpflowviz.contracts.measurements import assert_loaded, assert_binned
from vpflowviz.contracts.aggregation import (
    assert_aggregated,
    assert_no_empty_aggregates,
    assert_flowviz_output,
)

__all__ = [
    "ContractViolation",
    "InputParseError",
    "require",
    "assert_loaded",
    "assert_binned",
    "assert_aggregated",
    "assert_no_empty_aggregates",
    "assert_flowviz_output",
]
