"""
One-shot loader for the Google Maps JavaScript API bootstrap script.

The script is fetched at most once per URL per process. Callers that arrive
while a fetch is running wait on their own future and are all completed
together, with the script body or with MapsScriptLoadError. A failed fetch
resets the loader so the next call starts a fresh attempt.
"""
import asyncio
import logging
from typing import Callable, Dict, List

import httpx

from places_api.core.config import settings
from places_api.core.exceptions import MapsScriptLoadError
from places_api.core.logger import logs

MAPS_NAMESPACE_MARKER = "google.maps"

# Process-wide registries shared by every loader instance, keyed by script URL
_loaded_scripts: Dict[str, str] = {}
_inflight: Dict[str, asyncio.Task] = {}


class MapsScriptLoader:
    _instance: "MapsScriptLoader | None" = None

    def __init__(
        self,
        script_url: str,
        client_factory: Callable[..., httpx.AsyncClient] = httpx.AsyncClient,
        timeout: float = 10.0,
    ):
        self.script_url = script_url
        self.client_factory = client_factory
        self.timeout = timeout

        self.is_loading = False
        self.is_loaded = False
        self.callbacks: List[asyncio.Future] = []
        self.script: str | None = None

    @classmethod
    def get_instance(cls) -> "MapsScriptLoader":
        if cls._instance is None:
            cls._instance = cls(settings.maps_script_url, timeout=settings.MAPS_SCRIPT_TIMEOUT)
        return cls._instance

    def is_api_loaded(self) -> bool:
        return self.is_loaded

    async def load(self) -> str:
        if self.is_loaded:
            return self.script

        waiter = asyncio.get_running_loop().create_future()
        self.callbacks.append(waiter)

        if not self.is_loading:
            self._start()

        return await waiter

    def _start(self):
        # Another loader or code path may already have the script
        present = _loaded_scripts.get(self.script_url)
        if present is not None:
            self._mark_loaded(present)
            return

        self.is_loading = True

        task = _inflight.get(self.script_url)
        if task is None:
            logs.log(logging.INFO, "Loading Google Maps API script")
            task = asyncio.create_task(self._fetch())
            _inflight[self.script_url] = task
        else:
            logs.log(logging.INFO, "Google Maps API script already loading, waiting for it")

        task.add_done_callback(self._on_done)

    async def _fetch(self) -> str:
        try:
            async with self.client_factory(timeout=self.timeout) as client:
                response = await client.get(self.script_url)
                response.raise_for_status()
                body = response.text
        except httpx.HTTPStatusError as e:
            raise MapsScriptLoadError(f"Failed to load Google Maps API (HTTP {e.response.status_code})") from e
        except httpx.HTTPError as e:
            raise MapsScriptLoadError(f"Failed to load Google Maps API ({type(e).__name__})") from e
        finally:
            _inflight.pop(self.script_url, None)

        if MAPS_NAMESPACE_MARKER not in body:
            raise MapsScriptLoadError("Google Maps Places API not available after script load")

        _loaded_scripts[self.script_url] = body
        return body

    def _on_done(self, task: asyncio.Task):
        self.is_loading = False

        if task.cancelled():
            self._fail(MapsScriptLoadError("Google Maps API load was cancelled"))
            return

        error = task.exception()
        if error is not None:
            self._fail(error)
            return

        self._mark_loaded(task.result())

    def _mark_loaded(self, script: str):
        self.script = script
        self.is_loaded = True
        logs.log(logging.INFO, f"Google Maps API script loaded ({len(self.callbacks)} waiting)")

        callbacks, self.callbacks = self.callbacks, []
        for waiter in callbacks:
            if not waiter.done():
                waiter.set_result(script)

    def _fail(self, error: BaseException):
        if not isinstance(error, MapsScriptLoadError):
            error = MapsScriptLoadError(f"Failed to load Google Maps API ({type(error).__name__})")
        logs.log(logging.ERROR, f"Google Maps API loading error: {error.message}")

        callbacks, self.callbacks = self.callbacks, []
        for waiter in callbacks:
            if not waiter.done():
                waiter.set_exception(error)


# Dependency for FastAPI
def get_maps_loader() -> MapsScriptLoader:
    return MapsScriptLoader.get_instance()
