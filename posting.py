class Posting:
    """
    Posting that represents the set of document ids recorded under one index key.
    Used in InvertedIndex as following: {key: Posting}
    Membership is what matters; ids are kept in first-seen order and never repeated.
    """
    def __init__(self, doc_id: str = None):
        self.posting: dict[str, None] = {}  # insertion ordered set
        if doc_id is not None:
            self.add(doc_id)


    def __str__(self):
        return "\n".join(f"    Doc {doc_id}" for doc_id in self.posting)


    def __len__(self) -> int:
        return len(self.posting)


    def __iter__(self):
        return iter(self.posting)


    def __contains__(self, doc_id: str) -> bool:
        return doc_id in self.posting


    def __eq__(self, other) -> bool:
        if not isinstance(other, Posting):
            return NotImplemented
        return self.get_doc_ids() == other.get_doc_ids()


    def add(self, doc_id: str) -> None:
        self.posting.setdefault(doc_id, None)


    def get_posting(self, sorting=True) -> list[str]:
        """
        Exports document ids (choose sorted/unsorted)
        """
        return sorted(self.posting) if sorting else list(self.posting)


    def get_doc_ids(self) -> frozenset[str]:
        return frozenset(self.posting)


    def get_size(self) -> int:
        return len(self.posting)
