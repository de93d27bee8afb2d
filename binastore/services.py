from __future__ import annotations
from pathlib import Path
from typing import Optional

import httpx
import pyperclip

from .config import ShareConfig, load_share_config
from .log import get_logger

logger = get_logger("services")

class ShareUnavailable(Exception):
    pass

class ClipboardUnavailable(Exception):
    pass

def copy_to_clipboard(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardUnavailable(str(e)) from e
    logger.debug("Copied %d characters to clipboard", len(text))

class HttpShareTarget:
    """Posts the export as ``{"message": ...}`` to the configured share endpoint."""

    def __init__(self, cfg: ShareConfig, client: Optional[httpx.Client] = None):
        self.cfg = cfg
        self.client = client

    def share(self, message: str) -> None:
        if not self.cfg.endpoint:
            raise ShareUnavailable("No share endpoint configured (BINASTORE_SHARE_ENDPOINT)")
        headers = {"Content-Type": "application/json"}
        if self.cfg.api_key:
            headers["api-key"] = self.cfg.api_key
        client = self.client or httpx.Client()
        try:
            resp = client.post(
                self.cfg.endpoint,
                headers=headers,
                json={"message": message},
                timeout=self.cfg.timeout_seconds,
            )
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ShareUnavailable(str(e)) from e
        finally:
            if self.client is None:
                client.close()
        logger.info("Shared %d characters to %s", len(message), self.cfg.endpoint)

def http_share_target(client: Optional[httpx.Client] = None) -> HttpShareTarget:
    try:
        cfg = load_share_config()
    except ValueError as e:
        raise ShareUnavailable(f"Invalid share configuration: {e}") from e
    return HttpShareTarget(cfg, client=client)

class FileShareTarget:
    def __init__(self, path: str):
        self.path = path

    def share(self, message: str) -> None:
        try:
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
            Path(self.path).write_text(message, encoding="utf-8")
        except OSError as e:
            raise ShareUnavailable(str(e)) from e
        logger.info("Wrote export to %s", self.path)
