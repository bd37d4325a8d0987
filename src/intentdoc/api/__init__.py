"""
intentdoc web surface — FastAPI router, app factory and route extension.

The router mounts into any FastAPI app; running the standalone server
with ``intentdoc serve start`` needs uvicorn (``pip install intentdoc[api]``).
"""

from intentdoc.api.app import create_app, mount_intent_doc
from intentdoc.api.routing import install_route_extension, latest_route, uninstall_route_extension

__all__ = [
    "create_app",
    "install_route_extension",
    "latest_route",
    "mount_intent_doc",
    "uninstall_route_extension",
]
