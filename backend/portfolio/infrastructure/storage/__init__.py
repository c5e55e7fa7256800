from .json_document_store import JsonFileDocumentStore
from .seed import seed_document

__all__ = ["JsonFileDocumentStore", "seed_document"]
