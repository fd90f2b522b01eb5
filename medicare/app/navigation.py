"""Navigation shell shared by every page."""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator

ScrollListener = Callable[[float], None]


@dataclass(frozen=True, slots=True)
class NavLink:
    name: str
    endpoint: str
    icon: str


NAV_LINKS: tuple[NavLink, ...] = (
    NavLink("Home", "frontend.landing_page", "fa-home"),
    NavLink("Appointment", "frontend.appointment_form", "fa-calendar"),
    NavLink("Contact", "frontend.contact_page", "fa-address-book"),
)

AUTH_LINKS: tuple[NavLink, ...] = (
    NavLink("Login", "frontend.login_page", "fa-sign-in-alt"),
    NavLink("Register", "frontend.registration_form", "fa-user-plus"),
)


class ScrollEvents:
    """Minimal scroll event source listeners can attach to and detach from."""

    def __init__(self) -> None:
        self._listeners: list[ScrollListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: ScrollListener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, position: float) -> None:
        for listener in list(self._listeners):
            listener(position)


class NavigationShell:
    """Menu and scroll state of the top navigation bar.

    ``scrolled`` is recomputed on every scroll event; ``menu_open`` toggles on
    the menu button and is forced closed whenever a link is activated.
    """

    def __init__(self, scroll_threshold: float = 10, *, menu_open: bool = False) -> None:
        self.scroll_threshold = scroll_threshold
        self.menu_open = menu_open
        self.scrolled = False

    def toggle_menu(self) -> bool:
        self.menu_open = not self.menu_open
        return self.menu_open

    def activate(self, link: NavLink) -> str:
        """Close the mobile menu and return the endpoint to navigate to."""

        self.menu_open = False
        return link.endpoint

    def on_scroll(self, position: float) -> None:
        self.scrolled = position > self.scroll_threshold

    @contextmanager
    def observe(self, events: ScrollEvents) -> Iterator[NavigationShell]:
        """Follow ``events`` for the lifetime of the ``with`` block."""

        unsubscribe = events.subscribe(self.on_scroll)
        try:
            yield self
        finally:
            unsubscribe()
