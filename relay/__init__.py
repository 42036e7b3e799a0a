from .edge import handler, edge_app
from .server import create_relay_app

__all__ = ["handler", "edge_app", "create_relay_app"]
