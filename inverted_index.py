from typing import Iterable
from pympler.asizeof import asizeof
from datastructures import Document
from posting import Posting
from stemmer import stem
from utils import get_logger, tokenize_text


class InvertedIndex:
    """
    InvertedIndex that represents {key: Posting}.
    Keys are both the surface tokens seen in a document and their stems.
    Built once with InvertedIndex.build and only read afterwards.
    """
    def __init__(self):
        self.indexDict: dict[str, Posting] = dict()  # {key: Posting}
        self.logger = get_logger("INVERTED_INDEX")


    def __str__(self):
        output = []
        output.append("Printing InvertedIndex")
        for key, post in self.indexDict.items():
            output.append(f"Posting for key: {key}")
            output.append(str(post))
        output.append("Printing Finished")
        return "\n".join(output)


    def __len__(self) -> int:
        return len(self.indexDict)


    def __contains__(self, key: str) -> bool:
        return key in self.indexDict


    def __eq__(self, other) -> bool:
        """Two indexes are equal when every key maps to the same set of document ids"""
        if not isinstance(other, InvertedIndex):
            return NotImplemented
        return self.to_dict() == other.to_dict()


    @classmethod
    def build(cls, documents: Iterable[Document]) -> "InvertedIndex":
        """
        Index every document: title, description and body are joined into one
        text blob, tokenized, and each token is recorded under itself and under
        its stem.

        Parameters:
            documents (Iterable[Document]): extracted pages, ids are unique

        Returns:
            InvertedIndex: the finished index (empty for an empty corpus)
        """
        index = cls()
        doc_count = 0
        for document in documents:
            index.__process_document(document)
            doc_count += 1
        index.logger.info(f"Indexing completed: {doc_count} documents, {len(index)} unique keys")
        return index


    def add(self, key: str, doc_id: str) -> None:
        if not key:
            return
        if key in self.indexDict:
            self.indexDict[key].add(doc_id)
        else:
            self.indexDict[key] = Posting(doc_id)


    def get_posting(self, key: str) -> Posting:
        """Returns the posting for key, an empty Posting if the key was never indexed"""
        return self.indexDict.get(key, Posting())


    def lookup(self, keys: Iterable[str]) -> set[str]:
        """Union of the postings of all keys (logical OR)"""
        doc_ids = set()
        for key in keys:
            posting = self.indexDict.get(key)
            if posting is not None:
                doc_ids.update(posting)
        return doc_ids


    def keys(self) -> list[str]:
        return list(self.indexDict.keys())


    def to_dict(self) -> dict[str, frozenset[str]]:
        return {key: post.get_doc_ids() for key, post in self.indexDict.items()}


    def summary(self, sample_size: int = 20) -> dict:
        """
        Assorted numbers about the index
            totalWords  = number of keys
            sampleWords = first keys in sorted order
            indexSizeKb = in-memory size of the key -> posting map
        """
        return {
            "totalWords": len(self.indexDict),
            "sampleWords": sorted(self.indexDict)[:sample_size],
            "indexSizeKb": round(asizeof(self.indexDict) / 1024, 2),
        }


    def __process_document(self, document: Document) -> None:
        all_text = f"{document.title} {document.description} {document.body}"
        tokens = tokenize_text(all_text)
        for token in tokens:
            self.add(token, document.doc_id)
            root = stem(token)
            if root != token:
                self.add(root, document.doc_id)
        self.logger.debug(f"Indexed doc {document.doc_id}: {len(tokens)} tokens")
