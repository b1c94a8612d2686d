from .registry import Citation, get_all_citations, get_citation

__all__ = ["Citation", "get_all_citations", "get_citation"]
