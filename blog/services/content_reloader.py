import logging
import signal
import threading

from blog.services.content_store import ContentStore

logger = logging.getLogger(__name__)

STOP_RELOADER_EVENT = threading.Event()  # thread-safe shutdown signal
RELOAD_REQUESTED_EVENT = threading.Event()


def watch_reloads(store: ContentStore, interval: float = 0):
    """
    Reload the store whenever a reload is requested, and every `interval`
    seconds when interval > 0. Runs until stop_reloader() is called.
    """
    logger.info("Content reloader thread started")
    timeout = interval if interval and interval > 0 else None

    while not STOP_RELOADER_EVENT.is_set():
        requested = RELOAD_REQUESTED_EVENT.wait(timeout)
        if STOP_RELOADER_EVENT.is_set():
            break
        RELOAD_REQUESTED_EVENT.clear()

        reason = "requested" if requested else "interval elapsed"
        logger.info(f"Reloading post cache ({reason})...")
        try:
            if store.reload():
                logger.info("Post cache reloaded successfully")
        except Exception as e:
            logger.error(f"Unexpected reloader error: {e}")

    logger.info("Content reloader exited")


def request_reload():
    """Ask the reloader thread to rebuild the snapshot; returns immediately."""
    RELOAD_REQUESTED_EVENT.set()


def install_sighup_handler() -> bool:
    """Route SIGHUP to request_reload() where the platform supports it."""
    if not hasattr(signal, "SIGHUP"):
        logger.warning("SIGHUP handler not available on this platform")
        return False
    if threading.current_thread() is not threading.main_thread():
        logger.warning("SIGHUP handler can only be installed from the main thread")
        return False

    signal.signal(signal.SIGHUP, lambda signum, frame: request_reload())
    logger.info("SIGHUP handler installed")
    return True


def start_reloader(store: ContentStore, interval: float = 0):
    """Start reloader in a daemon thread"""
    STOP_RELOADER_EVENT.clear()
    RELOAD_REQUESTED_EVENT.clear()
    thread = threading.Thread(
        target=watch_reloads,
        args=(store, interval),
        daemon=True,
        name="ContentReloader",
    )
    thread.start()
    return thread


def stop_reloader():
    """Signal reloader to stop"""
    STOP_RELOADER_EVENT.set()
    RELOAD_REQUESTED_EVENT.set()  # wake the waiting thread
    logger.info("Content reloader stopping...")
