"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Futures journal
  2xxx: Spot portfolio
  3xxx: Billing (coupons, orders, subscriptions)

Calculation engines never raise for business edge cases (missing SL/TP,
zero risk, empty ledgers); they return None/0 sentinels instead. These
errors cover contract violations at the application layer.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Futures ---

class InvalidBalanceAdjustmentError(AppError):
    def __init__(self, kind: str) -> None:
        super().__init__(1001, f"Unknown balance adjustment type: {kind}", 422)


# --- 2xxx: Spot ---

class UnknownLedgerSideError(AppError):
    def __init__(self, side: str) -> None:
        super().__init__(2001, f"Unknown ledger entry type: {side}", 422)


# --- 3xxx: Billing ---

class InvalidOrderTransitionError(AppError):
    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            3001,
            f"Order in terminal status {current} cannot move to {target}",
            409,
        )
