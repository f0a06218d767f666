"""
MongoDB Database - Infrastructure Layer

This module owns the MongoDB client whose database handle is probed by the
document store probe.
"""

from typing import Any, Dict

from pymongo import MongoClient
from pymongo.database import Database


class MongoDatabase:
    """MongoDB database client."""

    def __init__(
        self,
        mongo_uri: str,
        db_name: str,
        server_selection_timeout_ms: int = 5000,
    ):
        """
        Initialize the MongoDB database client.

        The driver connects lazily, so construction succeeds even when the
        server is unreachable; the probe reports that on its first call.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to probe
            server_selection_timeout_ms: Upper bound for each probe call
        """
        options: Dict[str, Any] = {
            "serverSelectionTimeoutMS": server_selection_timeout_ms,
        }
        self.client: MongoClient = MongoClient(mongo_uri, **options)
        self.db: Database = self.client[db_name]

    def close(self) -> None:
        """Close the MongoDB connection."""
        self.client.close()
