"""HTTP interceptor that routes httpx client traffic through the engine."""

import logging
import threading
from typing import Any

import httpx

from request_mocker.core.engine import InterceptionEngine
from request_mocker.core.lifecycle import TransportHook

logger = logging.getLogger(__name__)


class HTTPInterceptor(TransportHook):
    """Patches ``httpx.AsyncClient.send`` and ``httpx.Client.send``.

    Mocked requests are answered from the engine; everything else goes to
    the original ``send`` with the lifecycle's send options merged in.
    Mocked responses still pass through the client's event hooks.
    Interceptors installed on top of each other must be removed in reverse
    order.
    """

    def __init__(self, engine: InterceptionEngine):
        self.engine = engine
        self.original_async_send: Any = None
        self.original_send: Any = None
        self._lock = threading.Lock()

    @property
    def is_installed(self) -> bool:
        return self.original_send is not None

    def install(self) -> None:
        """Start intercepting HTTP requests. Installing twice is a no-op."""
        with self._lock:
            if self.is_installed:
                return

            engine = self.engine
            original_async_send = httpx.AsyncClient.send
            original_send = httpx.Client.send

            async def intercepted_async_send(
                client_instance: httpx.AsyncClient,
                request: httpx.Request,
                **kwargs: Any,
            ) -> httpx.Response:
                """Intercepted async send method."""
                mocked = await engine.intercept_async(request)
                if mocked is None:
                    options = {**kwargs, **engine.lifecycle.send_options}
                    return await original_async_send(  # type: ignore[no-any-return]
                        client_instance, request, **options
                    )

                response = mocked.to_httpx(request)
                try:
                    for hook in client_instance._event_hooks["request"]:
                        await hook(request)
                    for hook in client_instance._event_hooks["response"]:
                        await hook(response)
                except BaseException:
                    await response.aclose()
                    raise
                return response

            def intercepted_send(
                client_instance: httpx.Client,
                request: httpx.Request,
                **kwargs: Any,
            ) -> httpx.Response:
                """Intercepted sync send method."""
                mocked = engine.intercept(request)
                if mocked is None:
                    options = {**kwargs, **engine.lifecycle.send_options}
                    return original_send(  # type: ignore[no-any-return]
                        client_instance, request, **options
                    )

                response = mocked.to_httpx(request)
                try:
                    for hook in client_instance._event_hooks["request"]:
                        hook(request)
                    for hook in client_instance._event_hooks["response"]:
                        hook(response)
                except BaseException:
                    response.close()
                    raise
                return response

            self.original_async_send = original_async_send
            self.original_send = original_send
            httpx.AsyncClient.send = intercepted_async_send  # type: ignore[method-assign,assignment]
            httpx.Client.send = intercepted_send  # type: ignore[method-assign,assignment]

        logger.debug("Installed httpx interception hook")

    def uninstall(self) -> None:
        """Stop intercepting HTTP requests."""
        with self._lock:
            if not self.is_installed:
                return

            httpx.AsyncClient.send = self.original_async_send  # type: ignore[method-assign]
            httpx.Client.send = self.original_send  # type: ignore[method-assign]
            self.original_async_send = None
            self.original_send = None

        logger.debug("Removed httpx interception hook")

    def __enter__(self) -> "HTTPInterceptor":
        self.install()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.uninstall()
