"""Transport factory and registry.

Transports are registered by name at import time via
:func:`register_transport`.  The active one is selected by reading the
``TRANSPORT_BACKEND`` configuration key.

Built-in transports registered automatically:

=========  =====================================================
Name       Class
=========  =====================================================
``httpx``  :class:`~milvus_rest.transport.httpx_transport.HttpxTransport`
=========  =====================================================
"""

import logging
from typing import Type

from milvus_rest.config import get_settings
from milvus_rest.transport.base import Transport

logger = logging.getLogger(__name__)

# Registry: lower-cased name → transport class
_transports: dict[str, Type[Transport]] = {}


def register_transport(name: str, transport_class: Type[Transport]):
    """Register a transport under *name*.

    Registering an existing name replaces it, which lets tests inject fakes.

    Args:
        name:            Lower-cased registry key (e.g. ``"httpx"``).
        transport_class: Concrete :class:`Transport` subclass.
    """
    _transports[name.lower()] = transport_class
    logger.debug("Registered transport: %s", name)


def get_transport() -> Transport:
    """Return an unconnected :class:`Transport` instance.

    The name is read from the ``TRANSPORT_BACKEND`` config key.  Call
    :meth:`~Transport.connect` on the returned instance before using it.

    Raises:
        ValueError: If the configured transport name is not registered.
    """
    settings = get_settings()
    name = settings.transport_backend.lower()
    if name not in _transports:
        raise ValueError(
            f"Transport {name!r} not registered. "
            f"Available: {sorted(_transports.keys())}"
        )
    logger.info("Loading transport: %s", name)
    return _transports[name]()


def list_transports() -> list[str]:
    """Return the names of all registered transports."""
    return sorted(_transports.keys())


def _register_builtin_transports():
    """Register built-in transports.  Called once at import time."""
    from milvus_rest.transport.httpx_transport import HttpxTransport

    register_transport("httpx", HttpxTransport)


_register_builtin_transports()
