"""STRK Tip Action service.

FastAPI application serving:
- Action descriptors for wallets and social integrations (JSON)
- Social preview pages that forward to the unfurler (HTML)
- Unsigned STRK transfer calls for tips
"""

import sys
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from src.config import config, validate_config
from src.logging_utils import (
    CORRELATION_ID_HEADER,
    CorrelationIdContext,
    get_logger,
    setup_logging,
)
from src.models import ActionDescriptor, ErrorResponse, TransactionResponse
from src.tip.actions import TIP_PATH, amount_descriptor, base_descriptor
from src.tip.errors import InvalidAmount, TipError
from src.tip.negotiation import wants_html
from src.tip.pages import build_page
from src.tip.transactions import prepare_transaction

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Validate configuration
validate_config()

# Setup logging
setup_logging(config.log_level, config.log_format)
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="STRK Tip Action",
    description="Shareable STRK tip actions and unsigned transfer calls",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)


def static_dir() -> Path:
    path = Path(config.static_dir)
    return path if path.is_absolute() else PROJECT_ROOT / path


@app.middleware("http")
async def correlation_id_middleware(request: Request, call_next):
    """Log every request under the caller's correlation ID, or a new one."""
    with CorrelationIdContext(request.headers.get(CORRELATION_ID_HEADER)) as correlation_id:
        response = await call_next(request)
    response.headers[CORRELATION_ID_HEADER] = correlation_id
    return response


@app.exception_handler(TipError)
async def tip_error_handler(request: Request, exc: TipError) -> JSONResponse:
    if isinstance(exc, InvalidAmount):
        logger.warning(f"Rejected tip amount: {exc.detail}")
    else:
        logger.error(f"Tip transaction failed: {exc.detail}", exc_info=exc)
    body = ErrorResponse(error=type(exc).__name__, detail=exc.detail)
    return JSONResponse(body.model_dump(), status_code=exc.status_code)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": "tip"}


@app.get("/", response_model=None)
async def serve_index() -> Union[FileResponse, dict]:
    """Serve the static landing page."""
    index_path = static_dir() / "index.html"
    if index_path.exists():
        return FileResponse(index_path)
    return {"message": "STRK Tip Action", "docs": "/docs"}


@app.get(TIP_PATH, response_model=ActionDescriptor, response_model_exclude_none=True)
async def get_tip_action(
    accept: Optional[str] = Header(None),
    user_agent: Optional[str] = Header(None),
):
    """Get the tip action with every preset amount.

    Browsers and the Twitter card scraper get the HTML preview page,
    everyone else the JSON action descriptor.
    """
    descriptor = base_descriptor()

    if wants_html(accept, user_agent):
        logger.info("Serving tip preview page")
        return HTMLResponse(
            build_page(
                descriptor.title,
                descriptor.description,
                descriptor.icon,
                actions=descriptor.links.actions,
            )
        )

    logger.info("Serving tip action descriptor")
    return descriptor


@app.get(
    TIP_PATH + "/{amount}", response_model=ActionDescriptor, response_model_exclude_none=True
)
async def get_tip_action_for_amount(
    amount: str,
    accept: Optional[str] = Header(None),
    user_agent: Optional[str] = Header(None),
):
    """Get a tip action scoped to a single amount.

    Args:
        amount: Tip amount in STRK, passed through unvalidated.
    """
    descriptor = amount_descriptor(amount)

    if wants_html(accept, user_agent):
        logger.info(f"Serving tip preview page for amount {amount!r}")
        return HTMLResponse(
            build_page(
                descriptor.title,
                descriptor.description,
                descriptor.icon,
                amount=amount,
                actions=descriptor.links.actions,
            )
        )

    logger.info(f"Serving tip action descriptor for amount {amount!r}")
    return descriptor


@app.post(
    TIP_PATH,
    response_model=TransactionResponse,
    responses={
        400: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def create_tip_transaction(amount: Optional[str] = None) -> TransactionResponse:
    """Prepare an unsigned STRK transfer of ``amount`` to the donation wallet.

    Returns:
        TransactionResponse with the JSON-serialized call.
    """
    logger.info(f"Tip transaction request, amount: {amount!r}")
    transaction = await prepare_transaction(amount)
    return TransactionResponse(transaction=transaction)


# Mounted last so the API routes above take precedence
if static_dir().is_dir():
    app.mount("/", StaticFiles(directory=str(static_dir()), html=True), name="static")


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting tip service on {config.host}:{config.port}")
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )
