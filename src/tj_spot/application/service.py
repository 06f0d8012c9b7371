from src.tj_spot.application.schemas import (
    CostBasisRequest,
    CostBasisResponse,
    HoldingsRequest,
    PortfolioResponse,
)
from src.tj_spot.domain.cost_basis import (
    calculate_average_price,
    summarize_holdings,
    value_holdings,
)


def cost_basis(req: CostBasisRequest) -> CostBasisResponse:
    summary = calculate_average_price(e.to_domain() for e in req.entries)
    return CostBasisResponse.from_domain(summary)


def portfolio(req: HoldingsRequest) -> PortfolioResponse:
    holdings = summarize_holdings(tx.to_transaction() for tx in req.transactions)
    prices = {symbol.upper(): price for symbol, price in req.prices.items()}
    return PortfolioResponse.from_domain(value_holdings(holdings, prices))
