"""Errors raised by the document store adapters."""


class StoreError(Exception):
    """A read or write against the document store failed."""

    def __init__(self, message: str, *, collection: str = "", doc_id: str = ""):
        super().__init__(message)
        self.collection = collection
        self.doc_id = doc_id


class DocumentNotFound(LookupError):
    """The requested document does not exist."""

    def __init__(self, collection: str, doc_id: str):
        super().__init__(f"{collection}/{doc_id} not found")
        self.collection = collection
        self.doc_id = doc_id


__all__ = ['StoreError', 'DocumentNotFound']
