"""
FarmerHub Core

Session & commerce state engine for the FarmerHub marketplace:
- auth: credential store, validation, snapshot storage
- catalog: in-memory product listings
- cart: session cart aggregation and checkout
- session: login/logout state machine
- app: process lifecycle (init_app / shutdown)

Note: Imports are lazy so that importing a submodule does not pull in
the whole package.
"""

__all__ = [
    "init_app",
    "Application",
    "SessionController",
    "Settings",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "init_app":
        from farmerhub.app import init_app
        return init_app
    elif name == "Application":
        from farmerhub.app import Application
        return Application
    elif name == "SessionController":
        from farmerhub.session import SessionController
        return SessionController
    elif name == "Settings":
        from farmerhub.config import Settings
        return Settings
    raise AttributeError(f"module 'farmerhub' has no attribute '{name}'")
