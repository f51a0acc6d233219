"""
Cart Router

Cart endpoints. Each request builds a controller whose ports capture
what a browser would show: the clear confirmation comes from the request
body, notices and the handoff URL go back in the response.
"""
from fastapi import APIRouter, Depends, HTTPException

from shopcart.actions import Action
from shopcart.app import Storefront
from shopcart.logging import get_logger
from shopcart.presentation import CartPanelView
from .deps import get_storefront
from .models import CartActionRequest, CartActionResponse, CartEventRequest

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["cart"])


class _RequestPorts:
    """Collects controller side effects for one request."""

    def __init__(self, confirmed: bool = False):
        self.confirmed = confirmed
        self.notice = None
        self.handoff_url = None
        self.auto_close_after = None

    def confirm(self, message: str) -> bool:
        return self.confirmed

    def alert(self, message: str) -> None:
        self.notice = message

    def open_uri(self, uri: str) -> None:
        self.handoff_url = uri

    def schedule(self, delay, callback) -> None:
        # The page owns the delay; server state closes right away
        self.auto_close_after = delay
        callback()

    def as_kwargs(self) -> dict:
        return {
            "confirm": self.confirm,
            "alert": self.alert,
            "open_uri": self.open_uri,
            "schedule": self.schedule,
        }


def _respond(controller, ports: _RequestPorts) -> CartActionResponse:
    return CartActionResponse(
        cart=controller.render(),
        handoff_url=ports.handoff_url,
        notice=ports.notice,
        auto_close_after=ports.auto_close_after,
    )


@router.get("/cart", response_model=CartPanelView)
async def get_cart(storefront: Storefront = Depends(get_storefront)):
    """Current cart panel."""
    return storefront.controller().render()


@router.post("/cart/actions", response_model=CartActionResponse)
async def post_cart_action(request: CartActionRequest, storefront: Storefront = Depends(get_storefront)):
    """Apply a typed cart action (add, increase, decrease, remove, clear, checkout)."""
    try:
        action = Action(kind=request.kind, id=request.id)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))

    ports = _RequestPorts(confirmed=request.confirmed)
    controller = storefront.controller(**ports.as_kwargs())
    controller.dispatch(action)
    return _respond(controller, ports)


@router.post("/cart/events", response_model=CartActionResponse)
async def post_cart_event(request: CartEventRequest, storefront: Storefront = Depends(get_storefront)):
    """Apply a raw UI event; unknown tags leave the cart untouched."""
    ports = _RequestPorts()
    controller = storefront.controller(**ports.as_kwargs())
    controller.handle_event(request.action, request.id)
    return _respond(controller, ports)


@router.post("/cart/open", response_model=CartPanelView)
async def open_cart(storefront: Storefront = Depends(get_storefront)):
    return storefront.controller().open_cart()


@router.post("/cart/close", response_model=CartPanelView)
async def close_cart(storefront: Storefront = Depends(get_storefront)):
    return storefront.controller().close_cart()
