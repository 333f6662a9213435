"""Investments resource router.

Endpoints:
    POST   /investments                   - Record a holding
    GET    /investments                   - List the user's holdings
    GET    /investments/portfolio-value   - Total market value
    GET    /investments/portfolio-return  - Aggregate unrealized return
    POST   /investments/refresh-prices    - Re-price every holding
    GET    /investments/{id}              - Get one holding
    PATCH  /investments/{id}              - Partially update a holding
    DELETE /investments/{id}              - Delete a holding

Every endpoint is scoped to the user in the ``X-User-ID`` header.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from mintlite.application.commands.handlers.create_holding_handler import (
    CreateHoldingHandler,
)
from mintlite.application.commands.handlers.delete_holding_handler import (
    DeleteHoldingHandler,
)
from mintlite.application.commands.handlers.refresh_portfolio_prices_handler import (
    RefreshPortfolioPricesHandler,
)
from mintlite.application.commands.handlers.update_holding_handler import (
    UpdateHoldingHandler,
)
from mintlite.application.commands.holding_commands import (
    CreateHolding,
    DeleteHolding,
    RefreshPortfolioPrices,
    UpdateHolding,
)
from mintlite.application.errors import ApplicationError, ApplicationErrorCode
from mintlite.application.queries.handlers.get_holding_handler import (
    GetHoldingHandler,
)
from mintlite.application.queries.handlers.get_portfolio_return_handler import (
    GetPortfolioReturnHandler,
)
from mintlite.application.queries.handlers.get_portfolio_value_handler import (
    GetPortfolioValueHandler,
)
from mintlite.application.queries.handlers.list_holdings_handler import (
    ListHoldingsHandler,
)
from mintlite.application.queries.holding_queries import GetHolding, ListHoldings
from mintlite.application.queries.portfolio_queries import (
    GetPortfolioReturn,
    GetPortfolioValue,
)
from mintlite.core.container import (
    get_create_holding_handler,
    get_delete_holding_handler,
    get_get_holding_handler,
    get_get_portfolio_return_handler,
    get_get_portfolio_value_handler,
    get_list_holdings_handler,
    get_refresh_portfolio_prices_handler,
    get_update_holding_handler,
)
from mintlite.core.result import Failure
from mintlite.presentation.errors import ErrorResponseBuilder
from mintlite.presentation.middleware import CurrentUserId, get_trace_id
from mintlite.schemas.holding_schemas import (
    CreateHoldingRequest,
    HoldingListResponse,
    HoldingResponse,
    PortfolioReturnResponse,
    PortfolioValueResponse,
    RefreshPortfolioPricesResponse,
    UpdateHoldingRequest,
)

router = APIRouter(prefix="/investments", tags=["Investments"])

HoldingId = Annotated[UUID, Path(description="Holding UUID")]


# =============================================================================
# Error Mapping (String → ApplicationError)
# =============================================================================


def _map_holding_error(error: str) -> ApplicationError:
    """Map handler string error to ApplicationError.

    Args:
        error: Error string from handler.

    Returns:
        ApplicationError with appropriate code and message.
    """
    error_lower = error.lower()

    if "not found" in error_lower:
        return ApplicationError(code=ApplicationErrorCode.NOT_FOUND, message=error)
    if "version conflict" in error_lower:
        return ApplicationError(code=ApplicationErrorCode.CONFLICT, message=error)
    if "invalid price" in error_lower:
        return ApplicationError(
            code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            message=error,
            field="current_price",
        )
    if "validation failed" in error_lower or "invalid" in error_lower:
        return ApplicationError(
            code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            message=error,
        )

    return ApplicationError(
        code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
        message=error,
    )


def _error_response(request: Request, error: str) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=_map_holding_error(error),
        request=request,
        trace_id=get_trace_id() or "",
    )


# =============================================================================
# Collection Endpoints
# =============================================================================


@router.post(
    "",
    response_model=HoldingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record holding",
    responses={400: {"description": "Invalid holding values"}},
)
async def create_holding(
    request: Request,
    user_id: CurrentUserId,
    data: CreateHoldingRequest,
    handler: CreateHoldingHandler = Depends(get_create_holding_handler),
) -> HoldingResponse | JSONResponse:
    """Record a holding manually.

    POST /investments → 201 Created
    """
    command = CreateHolding(
        user_id=user_id,
        account_id=data.account_id,
        symbol=data.symbol,
        name=data.name,
        asset_class=data.asset_class,
        quantity=data.quantity,
        cost_basis=data.cost_basis,
        current_price=data.current_price,
        currency=data.currency,
        metadata=data.metadata,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return HoldingResponse.from_dto(result.value)


@router.get(
    "",
    response_model=HoldingListResponse,
    summary="List holdings",
)
async def list_holdings(
    request: Request,
    user_id: CurrentUserId,
    handler: ListHoldingsHandler = Depends(get_list_holdings_handler),
) -> HoldingListResponse | JSONResponse:
    """List the user's holdings, newest first.

    GET /investments → 200 OK
    """
    result = await handler.handle(ListHoldings(user_id=user_id))

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return HoldingListResponse.from_dto(result.value)


# =============================================================================
# Portfolio Endpoints
# =============================================================================


@router.get(
    "/portfolio-value",
    response_model=PortfolioValueResponse,
    summary="Portfolio value",
)
async def get_portfolio_value(
    request: Request,
    user_id: CurrentUserId,
    handler: GetPortfolioValueHandler = Depends(get_get_portfolio_value_handler),
) -> PortfolioValueResponse | JSONResponse:
    """Total market value of the user's holdings.

    GET /investments/portfolio-value → 200 OK
    """
    result = await handler.handle(GetPortfolioValue(user_id=user_id))

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return PortfolioValueResponse.from_dto(result.value)


@router.get(
    "/portfolio-return",
    response_model=PortfolioReturnResponse,
    summary="Portfolio return",
)
async def get_portfolio_return(
    request: Request,
    user_id: CurrentUserId,
    handler: GetPortfolioReturnHandler = Depends(get_get_portfolio_return_handler),
) -> PortfolioReturnResponse | JSONResponse:
    """Aggregate unrealized return of the user's holdings.

    GET /investments/portfolio-return → 200 OK
    """
    result = await handler.handle(GetPortfolioReturn(user_id=user_id))

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return PortfolioReturnResponse.from_dto(result.value)


@router.post(
    "/refresh-prices",
    response_model=RefreshPortfolioPricesResponse,
    summary="Refresh prices",
    description="Fetch current prices for every holding. Per-holding failures "
    "are reported in the response body; the request itself still succeeds.",
)
async def refresh_prices(
    request: Request,
    user_id: CurrentUserId,
    handler: RefreshPortfolioPricesHandler = Depends(
        get_refresh_portfolio_prices_handler
    ),
) -> RefreshPortfolioPricesResponse | JSONResponse:
    """Re-price all of the user's holdings.

    POST /investments/refresh-prices → 200 OK
    """
    result = await handler.handle(RefreshPortfolioPrices(user_id=user_id))

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return RefreshPortfolioPricesResponse.from_dto(result.value)


# =============================================================================
# Item Endpoints
# =============================================================================


@router.get(
    "/{holding_id}",
    response_model=HoldingResponse,
    summary="Get holding",
    responses={404: {"description": "Holding not found"}},
)
async def get_holding(
    request: Request,
    user_id: CurrentUserId,
    holding_id: HoldingId,
    handler: GetHoldingHandler = Depends(get_get_holding_handler),
) -> HoldingResponse | JSONResponse:
    """Get one holding.

    GET /investments/{id} → 200 OK
    """
    result = await handler.handle(GetHolding(holding_id=holding_id, user_id=user_id))

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return HoldingResponse.from_dto(result.value)


@router.patch(
    "/{holding_id}",
    response_model=HoldingResponse,
    summary="Update holding",
    responses={
        400: {"description": "Invalid holding values"},
        404: {"description": "Holding not found"},
        409: {"description": "Version conflict"},
    },
)
async def update_holding(
    request: Request,
    user_id: CurrentUserId,
    holding_id: HoldingId,
    data: UpdateHoldingRequest,
    handler: UpdateHoldingHandler = Depends(get_update_holding_handler),
) -> HoldingResponse | JSONResponse:
    """Partially update a holding.

    PATCH /investments/{id} → 200 OK
    """
    command = UpdateHolding(
        holding_id=holding_id,
        user_id=user_id,
        expected_version=data.expected_version,
        account_id=data.account_id,
        name=data.name,
        asset_class=data.asset_class,
        quantity=data.quantity,
        cost_basis=data.cost_basis,
        current_price=data.current_price,
        currency=data.currency,
        metadata=data.metadata,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return HoldingResponse.from_dto(result.value)


@router.delete(
    "/{holding_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete holding",
    responses={404: {"description": "Holding not found"}},
)
async def delete_holding(
    request: Request,
    user_id: CurrentUserId,
    holding_id: HoldingId,
    handler: DeleteHoldingHandler = Depends(get_delete_holding_handler),
) -> Response:
    """Delete a holding.

    DELETE /investments/{id} → 204 No Content
    """
    result = await handler.handle(DeleteHolding(holding_id=holding_id, user_id=user_id))

    if isinstance(result, Failure):
        return _error_response(request, result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
