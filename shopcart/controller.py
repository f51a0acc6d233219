"""
Interaction Controller

Maps user actions onto the cart store, then persists and re-renders.
Also owns the cart overlay (open/closed) and the checkout handoff.

UI concerns that block or leave the page (confirmation dialog, notice,
opening the handoff URL) are injected as ports so the controller stays
toolkit-agnostic.
"""
import asyncio
import webbrowser
from dataclasses import dataclass
from typing import Any, Callable, Optional

from shopcart.actions import Action, ActionKind
from shopcart.cart.models import CartState
from shopcart.cart.service import CartStore
from shopcart.cart.storage import CartPersistence
from shopcart.catalog.service import CatalogCache
from shopcart.config import CART_AUTO_CLOSE_DELAY, ORDER_HANDOFF_BASE_URL, ORDER_PHONE_NUMBER
from shopcart.errors import (
    CatalogFetchError,
    EmptyCartError,
    ProductNotFound,
    CONFIRM_CLEAR_CART,
)
from shopcart.logging import get_logger
from shopcart.orders import build_handoff_url, format_order
from shopcart.presentation import CartPanelView, CatalogView, render_catalog, render_panel

logger = get_logger(__name__)

ESCAPE_KEY = "Escape"

ConfirmPort = Callable[[str], bool]
AlertPort = Callable[[str], None]
OpenUriPort = Callable[[str], Any]
RenderListener = Callable[[CartPanelView], None]
Scheduler = Callable[[float, Callable[[], Any]], Any]


def schedule_later(delay: float, callback: Callable[[], Any]):
    """
    Run callback after delay seconds on the running event loop.

    Without a running loop (or with no delay) the callback runs at once.
    """
    if delay <= 0:
        callback()
        return None
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        callback()
        return None
    return loop.call_later(delay, callback)


def _decline(message: str) -> bool:
    return False


def _log_alert(message: str) -> None:
    logger.info(f"Notice: {message}")


def _open_in_browser(uri: str) -> bool:
    return webbrowser.open_new_tab(uri)


@dataclass
class OverlayState:
    """Whether the cart overlay is shown. Shared by controllers of one storefront."""
    is_open: bool = False


class InteractionController:
    """
    Dispatches actions to the cart store.

    Every accepted mutation is followed by a save and a re-render; the
    rendered panel goes to on_render and is returned to the caller.
    """

    def __init__(
        self,
        store: CartStore,
        persistence: CartPersistence,
        catalog: CatalogCache,
        confirm: ConfirmPort = _decline,
        alert: AlertPort = _log_alert,
        open_uri: OpenUriPort = _open_in_browser,
        on_render: Optional[RenderListener] = None,
        schedule: Scheduler = schedule_later,
        auto_close_delay: float = CART_AUTO_CLOSE_DELAY,
        phone: str = ORDER_PHONE_NUMBER,
        handoff_base_url: str = ORDER_HANDOFF_BASE_URL,
        overlay: Optional[OverlayState] = None,
    ):
        self.store = store
        self.persistence = persistence
        self.catalog = catalog
        self.confirm = confirm
        self.alert = alert
        self.open_uri = open_uri
        self.on_render = on_render
        self.schedule = schedule
        self.auto_close_delay = auto_close_delay
        self.phone = phone
        self.handoff_base_url = handoff_base_url
        self.overlay = overlay if overlay is not None else OverlayState()

    @property
    def is_open(self) -> bool:
        return self.overlay.is_open

    # ==================== RENDERING ====================

    def render(self) -> CartPanelView:
        """Project current state and notify the render listener."""
        panel = render_panel(self.store.snapshot(), is_open=self.is_open)
        if self.on_render is not None:
            self.on_render(panel)
        return panel

    def render_catalog(self) -> CatalogView:
        return render_catalog(
            self.catalog.products,
            loading=self.catalog.loading,
            error=self.catalog.error,
        )

    async def load_catalog(self) -> CatalogView:
        """
        Load the catalog and return the resulting catalog view.

        A failed load is shown as the error placeholder; the previous
        cached products are kept and nothing is raised.
        """
        try:
            await self.catalog.load()
        except CatalogFetchError as e:
            logger.error(f"Catalog unavailable: {e}")
        return self.render_catalog()

    # ==================== OVERLAY ====================

    def open_cart(self) -> CartPanelView:
        self.overlay.is_open = True
        return self.render()

    def close_cart(self) -> CartPanelView:
        self.overlay.is_open = False
        return self.render()

    def handle_outside_click(self, on_overlay: bool) -> Optional[CartPanelView]:
        """Clicks on the overlay backdrop (not the panel) close the cart."""
        if on_overlay and self.is_open:
            return self.close_cart()
        return None

    def handle_key(self, key: str) -> Optional[CartPanelView]:
        if key == ESCAPE_KEY and self.is_open:
            return self.close_cart()
        return None

    # ==================== ACTIONS ====================

    def handle_event(self, tag: Optional[str], product_id: Optional[int]) -> Optional[CartPanelView]:
        """Dispatch a raw UI tag; unknown tags are ignored."""
        action = Action.from_tag(tag, product_id)
        if action is None:
            logger.debug(f"Ignoring UI event with tag {tag!r}")
            return None
        return self.dispatch(action)

    def dispatch(self, action: Action) -> Optional[CartPanelView]:
        """
        Apply an action.

        Returns the re-rendered panel, or None when nothing changed and
        nothing was rendered (unknown product, line not in cart,
        declined clear, checkout).
        """
        kind = action.kind
        before = self.store.state

        if kind == ActionKind.ADD:
            try:
                after = self.store.add(action.id)
            except ProductNotFound:
                logger.debug(f"Add ignored, product {action.id} not in catalog")
                return None
            self.overlay.is_open = True
            return self._commit(before, after)
        elif kind in (ActionKind.INCREASE, ActionKind.DECREASE, ActionKind.REMOVE):
            if self.store.get(action.id) is None:
                logger.debug(f"{kind.value} ignored, product {action.id} not in cart")
                return None
            if kind == ActionKind.INCREASE:
                return self._commit(before, self.store.increase(action.id))
            if kind == ActionKind.DECREASE:
                return self._commit(before, self.store.decrease(action.id))
            return self._commit(before, self.store.remove(action.id))
        elif kind == ActionKind.CLEAR:
            return self.clear()
        elif kind == ActionKind.CHECKOUT:
            self.checkout()
            return None
        raise ValueError(f"Unhandled action kind: {kind!r}")

    def clear(self) -> Optional[CartPanelView]:
        """Empty the cart after the user confirms; a refusal changes nothing."""
        if not self.confirm(CONFIRM_CLEAR_CART):
            return None
        before = self.store.state
        return self._commit(before, self.store.clear(), always_close=True)

    def checkout(self) -> Optional[str]:
        """
        Hand the order off to the messaging channel.

        Returns the handoff URL, or None when the cart is empty (the user
        gets a notice instead).
        """
        try:
            message = format_order(self.store.snapshot())
        except EmptyCartError as e:
            self.alert(str(e))
            return None

        url = build_handoff_url(message, phone=self.phone, base_url=self.handoff_base_url)
        logger.info(f"Checkout: {len(self.store)} lines, {self.store.total_quantity()} items")
        self.open_uri(url)
        return url

    def _commit(self, before: CartState, after: CartState, always_close: bool = False) -> CartPanelView:
        self.persistence.save(self.store.snapshot())
        panel = self.render()
        # Let the user see the empty render before the panel goes away
        if after == CartState.EMPTY and (before == CartState.NONEMPTY or always_close):
            self.schedule(self.auto_close_delay, self.close_cart)
        return panel
