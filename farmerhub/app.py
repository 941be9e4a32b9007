"""
Application lifecycle.

    app = init_app()
    app.register_exit_handler()
    ...
    app.shutdown()   # flushes the credential store once
"""
import atexit
from dataclasses import dataclass, field
from typing import Optional

from farmerhub.auth import CredentialStorage, CredentialStore
from farmerhub.cart import CartSession
from farmerhub.catalog import Catalog
from farmerhub.config import Settings
from farmerhub.errors import StoreIOError
from farmerhub.logging import get_logger
from farmerhub.session import SessionController

logger = get_logger(__name__)


@dataclass
class Application:
    """Owns every piece of core state for one process."""
    settings: Settings
    store: CredentialStore
    catalog: Catalog
    cart: CartSession
    controller: SessionController
    _shut_down: bool = field(default=False, repr=False)

    def shutdown(self) -> Optional[StoreIOError]:
        """Flush the credential store. Only the first call writes."""
        if self._shut_down:
            return None
        self._shut_down = True
        logger.info("Shutting down, saving credential store")
        return self.store.save()

    def register_exit_handler(self) -> None:
        """Save the store when the interpreter exits normally."""
        atexit.register(self.shutdown)


def init_app(settings: Optional[Settings] = None) -> Application:
    """Load the store (seeding the default account), seed the catalog, wire the session."""
    settings = settings or Settings.from_env()

    store = CredentialStore(CredentialStorage(settings.data_file))
    store.load()

    catalog = Catalog()
    catalog.seed()

    cart = CartSession(currency=settings.currency)
    controller = SessionController(store, catalog, cart)

    logger.info(f"FarmerHub ready: {len(store)} account(s), {len(catalog)} product(s)")
    return Application(
        settings=settings,
        store=store,
        catalog=catalog,
        cart=cart,
        controller=controller,
    )
