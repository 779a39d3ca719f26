"""Firestore-backed read of the flat terminals collection.

The Firebase app is initialised lazily on first use from the service-account
JSON held in configuration, then reused for the life of the process.
"""
import json
from typing import Any, Dict, List, Optional

import firebase_admin
from firebase_admin import credentials, firestore
from loguru import logger

from errors import ConfigurationError


class TerminalStore:
    """Lists documents of one collection as ``{"id": ..., **fields}`` dicts.

    Attributes:
        collection (str): Collection name, ``terminals`` by default
        service_account (str): Service-account key as a JSON string
    """

    def __init__(self, collection: str = "terminals", service_account: Optional[str] = None, client: Any = None):
        self.collection = collection
        self.service_account = service_account
        self._client = client

    def _get_client(self):
        if self._client is None:
            self._client = firestore.client(self._get_app())
        return self._client

    def _get_app(self) -> "firebase_admin.App":
        try:
            return firebase_admin.get_app()
        except ValueError:
            pass
        if not self.service_account:
            raise ConfigurationError("Document store service account is not configured")
        try:
            info = json.loads(self.service_account)
        except ValueError as exc:
            raise ConfigurationError("Document store service account is not valid JSON") from exc
        logger.info("Initializing Firebase app", project_id=info.get("project_id"))
        return firebase_admin.initialize_app(credentials.Certificate(info))

    def list_terminals(self) -> List[Dict[str, Any]]:
        snapshot = self._get_client().collection(self.collection).get()
        terminals = [{"id": doc.id, **(doc.to_dict() or {})} for doc in snapshot]
        logger.debug("Fetched terminals", collection=self.collection, count=len(terminals))
        return terminals
