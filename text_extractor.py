"""
Text extraction module supporting the cloud's input formats.
"""

import os
from typing import Optional, Tuple, Union
from abc import ABC, abstractmethod

# Optional imports, checked when an extractor is built
try:
    import PyPDF2

    HAS_PYPDF2 = True
except ImportError:
    HAS_PYPDF2 = False

try:
    import docx

    HAS_DOCX = True
except ImportError:
    HAS_DOCX = False


class TextExtractor(ABC):
    """Abstract base class for text extractors."""

    @abstractmethod
    def extract(self, source: Union[str, object]) -> str:
        """Extract text from the source."""


class TextFileExtractor(TextExtractor):
    """Extract text from plain text files."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def extract(self, source: Union[str, object]) -> str:
        if not isinstance(source, str):
            return source.read()
        with open(source, "r", encoding=self.encoding) as f:
            return f.read()


class DOCXExtractor(TextExtractor):
    """Extract paragraph text from DOCX files."""

    def __init__(self):
        if not HAS_DOCX:
            raise ImportError(
                "python-docx is required for DOCX input. Install with: pip install python-docx"
            )

    def extract(self, source: Union[str, object]) -> str:
        document = docx.Document(source)
        return "\n".join(paragraph.text for paragraph in document.paragraphs)


class PDFExtractor(TextExtractor):
    """Extract text from PDF files."""

    def __init__(self, page_range: Optional[Tuple[int, int]] = None):
        """
        Initialize PDF extractor.

        Args:
            page_range: Optional tuple of (start_page, end_page) for page selection
        """
        if not HAS_PYPDF2:
            raise ImportError(
                "PyPDF2 is required for PDF input. Install with: pip install PyPDF2"
            )
        self.page_range = page_range

    def extract(self, source: Union[str, object]) -> str:
        if isinstance(source, str):
            with open(source, "rb") as pdf_file:
                return self._extract_from_reader(PyPDF2.PdfReader(pdf_file))
        return self._extract_from_reader(PyPDF2.PdfReader(source))

    def _extract_from_reader(self, pdf_reader) -> str:
        total_pages = len(pdf_reader.pages)

        start_page, end_page = 0, total_pages
        if self.page_range:
            start_page = max(0, self.page_range[0])
            end_page = min(total_pages, self.page_range[1])

        return "\n".join(
            pdf_reader.pages[page_num].extract_text() or ""
            for page_num in range(start_page, end_page)
        )


class StringExtractor(TextExtractor):
    """Pass-through extractor for raw strings."""

    def extract(self, source: Union[str, object]) -> str:
        return str(source)


class TextExtractorFactory:
    """Factory for creating appropriate text extractors."""

    EXTRACTORS = {
        "txt": TextFileExtractor,
        "docx": DOCXExtractor,
        "pdf": PDFExtractor,
        "string": StringExtractor,
    }

    @staticmethod
    def create_extractor(input_type: str, **kwargs) -> TextExtractor:
        """
        Create a text extractor based on input type.

        Args:
            input_type: Type of input ('txt', 'docx', 'pdf', 'string')
            **kwargs: Additional arguments for specific extractors

        Returns:
            Appropriate TextExtractor instance
        """
        input_type = input_type.lower()
        if input_type not in TextExtractorFactory.EXTRACTORS:
            raise ValueError(f"Unsupported input type: {input_type}")

        extractor_class = TextExtractorFactory.EXTRACTORS[input_type]
        if input_type == "pdf":
            return extractor_class(page_range=kwargs.get("page_range"))
        if input_type == "txt":
            return extractor_class(encoding=kwargs.get("encoding", "utf-8"))
        return extractor_class()

    @staticmethod
    def detect_file_type(filepath: str) -> str:
        """Detect file type from its extension, defaulting to plain text."""
        ext = os.path.splitext(filepath)[1].lower()
        type_map = {
            ".txt": "txt",
            ".text": "txt",
            ".docx": "docx",
            ".pdf": "pdf",
        }
        return type_map.get(ext, "txt")
