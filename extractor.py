from typing import Iterable
from bs4 import BeautifulSoup
from datastructures import Document
from utils import get_logger

# Tags whose text is never visible on the rendered page
INVISIBLE_TAGS = ["script", "style", "noscript", "template", "iframe"]

# Tags that start a new line of text when rendered; inline tags (b, i, a, sub...)
# join their text to the surrounding words
BLOCK_TAGS = ["address", "article", "aside", "blockquote", "br", "dd", "div", "dl", "dt",
              "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2", "h3",
              "h4", "h5", "h6", "header", "hr", "li", "main", "nav", "ol", "p", "pre",
              "section", "table", "td", "th", "tr", "ul"]

extractor_logger = get_logger("EXTRACTOR")


class DocumentParseError(Exception):
    """Raised when a single document cannot be turned into a Document"""

    def __init__(self, doc_id: str, reason: str):
        super().__init__(f"Unable to parse document {doc_id}: {reason}")
        self.doc_id = doc_id
        self.reason = reason


def extract_document(doc_id: str, raw_markup: str) -> Document:
    """
    Parses one HTML page into its title, description and visible body text.
    Missing elements yield empty strings.

    Parameters:
        doc_id (str): The unique id (file name) of the page.
        raw_markup (str): HTML content.

    Returns:
        Document: the extracted fields

    Raises:
        DocumentParseError: when the markup cannot be parsed at all
    """
    if not isinstance(raw_markup, str):
        raise DocumentParseError(doc_id, f"expected text markup, got {type(raw_markup).__name__}")
    try:
        soup = BeautifulSoup(raw_markup, "html.parser")

        title = soup.title.get_text(strip=True) if soup.title else ""

        description = ""
        meta = soup.find("meta", attrs={"name": "description"})
        if meta is not None:
            description = (meta.get("content") or "").strip()

        body = ""
        if soup.body is not None:
            for tag in soup.body.find_all(INVISIBLE_TAGS):
                tag.decompose()
            for tag in soup.body.find_all(BLOCK_TAGS):
                tag.insert_before(" ")
                tag.insert_after(" ")
            body = " ".join(soup.body.get_text().split())
    except Exception as e:
        raise DocumentParseError(doc_id, str(e)) from e

    return Document(doc_id=doc_id, title=title, description=description, body=body)


def extract_corpus(corpus: Iterable[tuple[str, str]]) -> list[Document]:
    """
    Extracts every (id, markup) pair of a corpus.
    Pages that fail to parse, and repeated ids, are logged and skipped.
    """
    documents = []
    seen_ids = set()
    for doc_id, raw_markup in corpus:
        if doc_id in seen_ids:
            extractor_logger.warning(f"Skipping doc {doc_id}: duplicate document id")
            continue
        try:
            document = extract_document(doc_id, raw_markup)
        except DocumentParseError as e:
            extractor_logger.warning(f"Skipping doc {doc_id}: {e.reason}")
            continue
        seen_ids.add(doc_id)
        documents.append(document)
        extractor_logger.info(f'Extracted: {doc_id} - Title: "{document.title}"')
    return documents
