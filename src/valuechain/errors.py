"""Error types for chain contract violations."""

from __future__ import annotations


class ContractError(Exception):
    """Error raised when a caller violates a chain operation's contract.

    Not-found outcomes are reported as ``False`` by the traversal functions;
    this error is reserved for misuse such as building an empty chain or
    passing something other than a ``Ref`` to ``as_``.

    Attributes:
        culprit: The argument that broke the contract, if there was one
    """

    def __init__(self, message: str, culprit: object = None) -> None:
        super().__init__(message)
        self.culprit = culprit
