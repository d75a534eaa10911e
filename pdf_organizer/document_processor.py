"""
Text extraction for the local corpus.

Handles:
1. PDF text extraction (PyMuPDF, page by page)
2. Plain text / Markdown files
3. HTML files (converted to Markdown with html2text)
4. Parallel corpus building from a list of paths

Extraction never raises: an unreadable or corrupt file yields "" and is
left out of the corpus.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Tuple

import html2text
import pymupdf

logger = logging.getLogger(__name__)

PDF_EXTENSIONS = {".pdf"}
TEXT_EXTENSIONS = {".txt", ".md", ".markdown", ".rst"}
HTML_EXTENSIONS = {".html", ".htm"}


class TextExtractor:
    """Extract plain text from supported document formats"""

    @property
    def supported_extensions(self) -> set:
        return PDF_EXTENSIONS | TEXT_EXTENSIONS | HTML_EXTENSIONS

    def extract_text(self, path: str) -> str:
        """
        Extract text based on file extension.

        Args:
            path: Path to document

        Returns:
            Extracted text, or "" on any failure
        """
        ext = Path(path).suffix.lower()
        try:
            if ext in PDF_EXTENSIONS:
                return self.extract_text_from_pdf(path)
            if ext in TEXT_EXTENSIONS:
                return self.extract_text_from_txt(path)
            if ext in HTML_EXTENSIONS:
                return self.extract_text_from_html(path)
        except Exception as e:
            logger.error(f"Could not extract text from {path}: {e}")
            return ""

        logger.warning(f"Unsupported document type '{ext}': {path}")
        return ""

    def extract_text_from_pdf(self, pdf_path: str) -> str:
        """
        Extract text from PDF using PyMuPDF.

        Page texts are joined with blank lines.
        """
        with pymupdf.open(pdf_path) as doc:
            logger.debug(f"PDF has {len(doc)} pages, extracting text: {pdf_path}")
            pages = [page.get_text() for page in doc]

        text = "".join(page_text + "\n\n" for page_text in pages)
        logger.debug(f"Extracted {len(text)} chars from PDF")
        return text

    def extract_text_from_txt(self, txt_path: str) -> str:
        with open(txt_path, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()

    def extract_text_from_html(self, html_path: str) -> str:
        """Convert HTML to Markdown text (links and emphasis kept as Markdown)"""
        with open(html_path, 'r', encoding='utf-8', errors='replace') as f:
            html_string = f.read()

        converter = html2text.HTML2Text()
        converter.ignore_images = True
        converter.body_width = 0  # No line wrapping

        return converter.handle(html_string)

    def build_corpus(self, paths: Iterable[str], max_workers: int = 4) -> List[Tuple[str, str]]:
        """
        Extract every path and return (path, text) pairs in input order.

        Documents with empty text are dropped. PDFs are always extracted
        sequentially in the calling thread (PyMuPDF is not thread-safe);
        only text and HTML files go through the thread pool.

        Args:
            paths: Document paths
            max_workers: Extraction threads for non-PDF files (1 = sequential)
        """
        paths = list(paths)
        if not paths:
            return []

        texts = {}
        threaded = []
        for i, path in enumerate(paths):
            if Path(path).suffix.lower() in PDF_EXTENSIONS:
                texts[i] = self.extract_text(path)
            else:
                threaded.append(i)

        if max_workers <= 1 or len(threaded) <= 1:
            for i in threaded:
                texts[i] = self.extract_text(paths[i])
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                for i, text in zip(threaded, executor.map(self.extract_text, [paths[i] for i in threaded])):
                    texts[i] = text

        # Reassemble by input position, so the corpus order is deterministic
        pairs = [(path, texts[i]) for i, path in enumerate(paths) if texts[i]]

        skipped = len(paths) - len(pairs)
        if skipped:
            logger.info(f"Skipped {skipped} documents with no extractable text")
        return pairs
