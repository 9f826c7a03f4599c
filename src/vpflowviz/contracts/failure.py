"""Centralized failure types for the pipeline.

Contracts fail fast, loud, and once. All contract violations raise the
same exception type, allowing the caller to handle pipeline bugs uniformly.
Bad input files get their own type so they are not mistaken for bugs.
"""


class ContractViolation(RuntimeError):
    """Raised when a pipeline contract is violated.

    This indicates a bug in pipeline logic, not bad user input. It means a
    pipeline stage did not produce the invariants it promised.

    Key distinction:
    - ValueError: User/config error (handled by Pydantic)
    - InputParseError: vp file unreadable or not matching the schema
    - ContractViolation: Pipeline bug (programmer error)
    """
    pass


class InputParseError(ValueError):
    """Raised when a vp input file cannot be read as the expected table.

    Fatal for the run: there is no skip-and-continue policy, a partial
    load would silently bias every aggregate.
    """

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse vp file {path}: {reason}")
