"""Tests for tj_common.errors and tj_common.response."""

from src.tj_common.errors import (
    AppError,
    InvalidBalanceAdjustmentError,
    InvalidOrderTransitionError,
    UnknownLedgerSideError,
)
from src.tj_common.response import error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1001, message="test"), Exception)


class TestSpecificErrors:
    def test_invalid_balance_adjustment(self) -> None:
        err = InvalidBalanceAdjustmentError("TRADE")
        assert err.code == 1001
        assert err.http_status == 422
        assert "TRADE" in err.message

    def test_unknown_ledger_side(self) -> None:
        err = UnknownLedgerSideError("SWAP")
        assert err.code == 2001
        assert err.http_status == 422

    def test_invalid_transition(self) -> None:
        err = InvalidOrderTransitionError("PAID", "FAILED")
        assert err.code == 3001
        assert err.http_status == 409
        assert "PAID" in err.message and "FAILED" in err.message


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"net_pnl": 12.5})
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"net_pnl": 12.5}
        assert resp.request_id.startswith("req_")

    def test_error(self) -> None:
        resp = error_response(3001, "Order in terminal status")
        assert resp.code == 3001
        assert resp.data is None

    def test_serialization(self) -> None:
        d = success_response({"x": 1}).model_dump()
        assert set(d) == {"code", "message", "data", "timestamp", "request_id"}
