from typing import Protocol

from .model import Document, DocumentId, FetchedDocument


class ParserStrategy(Protocol):
    """
    Parse Markdown text into a Document tree.
    """

    def parse(self, text: str) -> Document:
        pass


class FormatterStrategy(Protocol):
    """
    Serialize a Document tree back to Markdown text.
    """

    def format(self, doc: Document) -> str:
        pass


class DocumentApi(Protocol):
    """
    Remote document store addressed by url-id.
    """

    def fetch_document(self, id: DocumentId) -> FetchedDocument:
        pass

    def update_document(self, id: DocumentId, text: str, title: str = "") -> None:
        pass

    def close(self) -> None:
        pass
