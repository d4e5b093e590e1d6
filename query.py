from collections import namedtuple
from typing import Iterable, Mapping
from authority import AuthorityTable
from datastructures import Document, RankedResult
from extractor import extract_corpus
from inverted_index import InvertedIndex
from scorer import score_document
from stemmer import variations
from utils import get_logger, normalize_text, tokenize_text

query_logger = get_logger("QUERY")

# Everything a query reads, published as one unit
IndexSnapshot = namedtuple("IndexSnapshot", ["index", "documents"])


class IndexNotReadyError(RuntimeError):
    """Raised when a query arrives before any index has been built"""

    def __init__(self):
        super().__init__("Search index is not ready: no index has been built yet")


def process_query(query: str) -> set[str]:
    """
    Processes a query. Transforms the query string into its variation set.
    Each word of the normalized query is expanded on its own and the sets are
    joined; the whole multi-word string is never looked up as a single key.

    Parameters:
        query (str): a raw query string

    Returns:
        set[str]: every surface form to look up, empty for blank or
        punctuation only queries
    """
    term = normalize_text(query)
    if not term:
        return set()

    query_variations = set()
    for token in tokenize_text(term):
        query_variations |= variations(token)

    query_logger.info(f"Query '{term}' expanded to: {sorted(query_variations)}")
    return query_variations


def ranked_search(query_variations: set[str],
                  inverted_index: InvertedIndex,
                  documents: Mapping[str, Document],
                  authority: AuthorityTable) -> list[RankedResult]:
    """
    Scores every document whose postings contain at least one variation.

    Returns:
        list[RankedResult]: sorted by descending total score, tie-break with doc_id
    """
    candidates = inverted_index.lookup(query_variations)
    query_logger.info(f"Found {len(candidates)} candidate documents")

    results = []
    for doc_id in candidates:
        document = documents[doc_id]
        breakdown = score_document(document, query_variations, authority.get_weight(doc_id))
        results.append(RankedResult(document=document, breakdown=breakdown))

    return sorted(results, key=lambda result: (-result.total_score, result.doc_id))


class SearchEngine:
    """
    Answers keyword queries against the most recently built index.

    The engine starts unindexed; build_index (or publish) makes it ready.
    A rebuild replaces the whole snapshot at once, it never mutates the one
    in-flight queries are reading.
    """
    def __init__(self, authority: AuthorityTable = None, index: InvertedIndex = None,
                 documents: Iterable[Document] = None):
        self.authority = authority if authority is not None else AuthorityTable()
        self._snapshot = None
        if index is not None:
            self.publish(index, documents)


    @property
    def is_ready(self) -> bool:
        return self._snapshot is not None


    @property
    def snapshot(self) -> IndexSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            raise IndexNotReadyError()
        return snapshot


    def publish(self, index: InvertedIndex, documents: Iterable[Document]) -> None:
        """
        Makes index and documents the snapshot every later query reads.

        Raises:
            ValueError: documents is missing, or some posting names a document
            that is not among them (the current snapshot is kept)
        """
        if documents is None:
            raise ValueError("documents are required to publish an index")
        documents_by_id = {document.doc_id: document for document in documents}
        missing = set()
        for key in index.keys():
            missing.update(doc_id for doc_id in index.get_posting(key) if doc_id not in documents_by_id)
        if missing:
            raise ValueError(f"index references unknown documents: {sorted(missing)}")
        self._snapshot = IndexSnapshot(index=index, documents=documents_by_id)


    def build_index(self, corpus: Iterable[tuple[str, str]]) -> InvertedIndex:
        """
        Extracts and indexes a corpus of (id, html) pairs, then publishes it.
        """
        documents = extract_corpus(corpus)
        index = InvertedIndex.build(documents)
        self.publish(index, documents)
        query_logger.info(f"Search engine ready: {len(documents)} pages, {len(index)} keys")
        return index


    def search(self, query: str) -> list[RankedResult]:
        """
        Ranked results for a free text query.

        Raises:
            IndexNotReadyError: no index has been published yet
        """
        snapshot = self.snapshot
        query_variations = process_query(query)
        if not query_variations:
            return []
        return ranked_search(query_variations, snapshot.index, snapshot.documents, self.authority)


    def index_info(self, sample_size: int = 20) -> dict:
        snapshot = self.snapshot
        info = {
            "totalPages": len(snapshot.documents),
            "pages": sorted(snapshot.documents),
        }
        info.update(snapshot.index.summary(sample_size))
        return info
