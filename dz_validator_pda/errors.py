"""Exceptions raised by validator deposit operations.

Every exception carries a stable ``code`` so callers can tell a refusal
(``FundingCancelled``) apart from broken infrastructure (``ClientError``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import (
    ERR_CLIENT,
    ERR_FUNDING_CANCELLED,
    ERR_INVALID_AMOUNT,
    ERR_SUBMISSION_FAILED,
)

if TYPE_CHECKING:
    from .types import FundingDecision


class DepositError(Exception):
    """Base class for all validator deposit errors."""

    code = "deposit_error"

    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class ValidationError(DepositError, ValueError):
    """Malformed user input: operation, identity, amount or keypair."""

    code = "validation_error"


class ClientError(DepositError):
    """An RPC call failed."""

    code = ERR_CLIENT

    def __init__(self, message: str, *, detail: str | None = None, code: str | None = None):
        super().__init__(message, code=code)
        self.detail = detail


class FundingError(DepositError):
    """Base class for funding workflow failures."""

    code = "funding_error"


class FundingCancelled(FundingError):
    """Funding was refused by the liveness gate.

    Not a failure of the tool: the gate decided it was unsafe to move funds.
    """

    code = ERR_FUNDING_CANCELLED

    def __init__(
        self,
        reason: str,
        *,
        decision: FundingDecision,
        code: str | None = None,
    ):
        super().__init__(f"Funding cancelled: {reason}", code=code)
        self.reason = reason
        self.decision = decision


class InvalidAmount(FundingError, ValueError):
    """Amount is not a positive number of lamports."""

    code = ERR_INVALID_AMOUNT


class SubmissionFailed(FundingError):
    """The RPC node rejected or failed to accept the transfer."""

    code = ERR_SUBMISSION_FAILED

    def __init__(self, detail: str):
        super().__init__(f"Transaction submission failed: {detail}")
        self.detail = detail
