"""
Database Package - Infrastructure Layer

Client handles for the databases probed by the application.
"""

from .mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
