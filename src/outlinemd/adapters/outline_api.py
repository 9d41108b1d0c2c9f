"""Outline HTTP API client (documents.info / documents.update)."""

import logging
from typing import Any

import requests

from ..config import DEFAULT_BASE_URL
from ..core.model import DocumentId, FetchedDocument
from ..core.ports import DocumentApi
from ..errors import BadRequestError, OutlineError, UnexpectedResponseError

logger = logging.getLogger(__name__)


class OutlineClient(DocumentApi):
    """
    Minimal Outline API client.

    Every Outline endpoint is a JSON POST; responses wrap their payload in
    a `data` envelope.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        })

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "OutlineClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _post(self, endpoint: str, payload: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}/{endpoint}"
        logger.debug("POST %s", url)
        try:
            resp = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise OutlineError(f"{endpoint}: {e}") from e

        if resp.status_code != 200:
            if resp.status_code == 400:
                try:
                    resp.json()
                except ValueError:
                    pass
                else:
                    raise BadRequestError(resp.text.strip())
            raise UnexpectedResponseError(
                f"unexpected status: {resp.status_code} {resp.reason}".rstrip()
            )

        ct = resp.headers.get("Content-Type", "")
        if not ct.startswith("application/json"):
            raise UnexpectedResponseError(f"unexpected content-type: {ct}")
        try:
            return resp.json()
        except ValueError as e:
            raise UnexpectedResponseError(f"{endpoint}: invalid JSON response") from e

    def fetch_document(self, id: DocumentId) -> FetchedDocument:
        """Download a document's title and Markdown body."""
        body = self._post("documents.info", {"id": id})
        data = body.get("data") or {}
        text = data.get("text") or ""
        logger.debug("fetched document %s (%d chars)", id, len(text))
        return FetchedDocument(title=data.get("title") or "", text=text)

    def update_document(self, id: DocumentId, text: str, title: str = "") -> None:
        """Replace a document's body, and its title when one is given."""
        self._post("documents.update", update_payload(id, text, title))
        logger.debug("updated document %s", id)


def update_payload(id: DocumentId, text: str, title: str = "") -> dict[str, Any]:
    """Request body for documents.update; an empty title is left out."""
    payload: dict[str, Any] = {"id": id}
    if title:
        payload["title"] = title
    payload["text"] = text
    return payload
