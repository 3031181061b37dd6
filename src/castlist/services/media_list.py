"""Media list model: background loading with listener notifications."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from functools import partial
from typing import Protocol

from castlist.config import LoaderConfig
from castlist.exceptions import CastListError, LoadError
from castlist.models.cancel import LoadTicket
from castlist.models.tree import MediaTree, TreeNode
from castlist.services.decoder import decode_document
from castlist.services.fetcher import FetcherProtocol, HTTPFetcher

logger = logging.getLogger(__name__)

Dispatch = Callable[[Callable[[], None]], object]


class MediaListListener(Protocol):
    """Receives the outcome of MediaListModel loads.

    Exactly one of the two methods is called per load that is neither
    cancelled nor superseded.
    """

    def on_media_list_loaded(self, model: MediaListModel) -> None:
        """Called when the media list has loaded."""
        ...

    def on_media_list_load_failed(
        self, model: MediaListModel, error: CastListError
    ) -> None:
        """Called when the media list has failed to load."""
        ...


def _run_inline(callback: Callable[[], None]) -> None:
    callback()


class MediaListModel:
    """A hierarchy of media items loaded from a media list document.

    Loads run on a background thread, one at a time. Starting a new load
    cancels the previous one, and a cancelled load never notifies.

    Completion (committing the tree and notifying the listener) runs on the
    notification channel given as ``dispatch``. Pass
    ``loop.call_soon_threadsafe`` to receive notifications on an asyncio
    loop; by default they arrive on the worker thread.

    Example:
        >>> model = MediaListModel(listener=my_listener)
        >>> model.load("https://example.com/media.json")
        >>> # later, in my_listener.on_media_list_loaded(model):
        >>> model.root.children
    """

    def __init__(
        self,
        listener: MediaListListener | None = None,
        config: LoaderConfig | None = None,
        fetcher: FetcherProtocol | None = None,
        dispatch: Dispatch | None = None,
    ) -> None:
        """Initialize the model.

        Args:
            listener: Receiver of load notifications.
            config: Loader configuration. Uses defaults if not provided.
            fetcher: Document fetcher. Creates an HTTPFetcher if not provided.
            dispatch: Notification channel for completions.
        """
        self.listener = listener
        self._config = config or LoaderConfig()
        self._fetcher = fetcher or HTTPFetcher(
            timeout=self._config.timeout, user_agent=self._config.user_agent
        )
        self._dispatch: Dispatch = dispatch or _run_inline

        self._lock = threading.Lock()
        self._ticket: LoadTicket | None = None
        self._worker: threading.Thread | None = None

        self._tree: MediaTree | None = None
        self._is_loaded = False

    @property
    def root(self) -> TreeNode | None:
        """Root of the last successfully loaded tree."""
        return self._tree.root if self._tree else None

    @property
    def title(self) -> str:
        """Display name of the last successfully loaded list."""
        return (self._tree.title or "") if self._tree else ""

    @property
    def tree(self) -> MediaTree | None:
        return self._tree

    @property
    def is_loaded(self) -> bool:
        """Whether a load has ever completed successfully."""
        return self._is_loaded

    @property
    def is_loading(self) -> bool:
        """Whether a load is in flight."""
        with self._lock:
            return self._ticket is not None

    def load(self, url: str) -> None:
        """Begin loading the media list from the given URL.

        Any load in flight is cancelled first. The listener is messaged
        when this load completes or fails.

        Args:
            url: URL of the JSON document describing the media hierarchy.
        """
        ticket = LoadTicket(url)
        with self._lock:
            if self._ticket is not None:
                self._ticket.cancel()
                logger.debug("Superseding %r", self._ticket)
            self._ticket = ticket
            self._worker = threading.Thread(
                target=self._run,
                args=(ticket,),
                name="castlist-load",
                daemon=True,
            )
            worker = self._worker
        worker.start()

    def cancel_load(self) -> bool:
        """Cancel the in-flight load, if any.

        Safe to call at any time. A load whose completion has not yet been
        committed never notifies, even if that completion is already
        scheduled on the channel. A load already committed (tree stored,
        listener about to be called) is no longer in flight, so its
        notification still fires and this call is a no-op.

        Returns:
            True if a load in flight was cancelled.
        """
        with self._lock:
            ticket = self._ticket
            if ticket is None:
                return False
            ticket.cancel()
            self._ticket = None
        logger.debug("Cancelled %r", ticket)
        return True

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the current worker thread finishes.

        Completions scheduled on a non-inline channel may still be pending.

        Returns:
            True if no worker is running when this returns.
        """
        with self._lock:
            worker = self._worker
        if worker is None:
            return True
        worker.join(timeout)
        return not worker.is_alive()

    def _run(self, ticket: LoadTicket) -> None:
        """Worker thread body: fetch, decode, then hand off to the channel."""
        url = ticket.url
        try:
            data = self._fetcher.fetch(url)
            if ticket.is_cancelled:
                return
            tree = decode_document(data, self._config.video_format)
        except CastListError as e:
            if isinstance(e, LoadError):
                logger.warning("Failed to fetch media list %s: %s", url, e)
            else:
                logger.warning("Failed to decode media list %s: %s", url, e)
            self._dispatch(partial(self._complete, ticket, None, e))
            return
        except Exception as e:
            logger.exception("Unexpected error loading media list %s", url)
            error = LoadError(f"Unexpected error loading {url}: {e}")
            error.__cause__ = e
            self._dispatch(partial(self._complete, ticket, None, error))
            return

        self._dispatch(partial(self._complete, ticket, tree, None))

    def _complete(
        self,
        ticket: LoadTicket,
        tree: MediaTree | None,
        error: CastListError | None,
    ) -> None:
        """Commit the outcome and notify, unless the load was cancelled."""
        with self._lock:
            if ticket.is_cancelled or self._ticket is not ticket:
                logger.debug("Dropping result of %r", ticket)
                return
            self._ticket = None
            if tree is not None:
                self._tree = tree
                self._is_loaded = True

        listener = self.listener
        if tree is not None:
            logger.info(
                "Loaded media list %r (%d items)", tree.title, len(tree.root.children)
            )
            if listener is not None:
                listener.on_media_list_loaded(self)
        elif error is not None and listener is not None:
            listener.on_media_list_load_failed(self, error)
