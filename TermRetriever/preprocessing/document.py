from typing import Dict, Any


class Document:
    """
    Represents a document handed to the term index.
    The index reads the content once and keeps only the identifier.
    """

    __slots__ = ("_id", "_content")

    def __init__(self, id: int = None, content: str = "", text: str = "", doc_id: int = None):
        """
        Initialize a document.

        Args:
            id: Caller assigned document identifier
            doc_id: Alternative name for id (for compatibility)
            content: Raw document text
            text: Raw document text (alternative to content)
        """
        self._id = doc_id if id is None else id
        self._content = content or text or ""

    @property
    def id(self) -> int:
        return self._id

    @property
    def content(self) -> str:
        return self._content

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Document':
        """
        Create a document from a JSON record.

        Args:
            data: Dictionary with an "id" and a "content" (or "text") field

        Returns:
            Document object

        Raises:
            ValueError: If the record is not a dictionary or its text is not a string
        """
        if not isinstance(data, dict):
            raise ValueError(f"Document record must be an object, got {type(data).__name__}")

        doc_id = data.get("id", data.get("doc_id"))
        if isinstance(doc_id, str) and doc_id.lstrip("-").isdigit():
            doc_id = int(doc_id)

        for field in ("content", "text"):
            value = data.get(field)
            if value is not None and not isinstance(value, str):
                raise ValueError(
                    f"Document {doc_id!r}: '{field}' must be a string, got {type(value).__name__}"
                )

        return cls(id=doc_id, content=data.get("content") or "", text=data.get("text") or "")

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self._id, "content": self._content}

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return self._id == other._id and self._content == other._content

    def __hash__(self):
        return hash((self._id, self._content))

    def __repr__(self):
        preview = self._content[:30] + ("..." if len(self._content) > 30 else "")
        return f"Document(id={self._id!r}, content={preview!r})"
