"""
RDF/OWL Loader

Loads ontology and data graph files additively into a single in-memory
rdflib store that the relationship and ancestry queries run against.
"""

import logging
from pathlib import Path
from typing import IO, Dict, List, Optional, Union

from rdflib import Graph

from ..exceptions import OntologyLoadError

logger = logging.getLogger(__name__)

RDFSource = Union[str, Path, IO]


class RDFLoader:
    """
    Loads RDF files into one shared store
    Every load adds triples; nothing is ever replaced
    """

    def __init__(self, store: Optional[Graph] = None):
        self.store = store if store is not None else Graph()
        self.files_loaded: List[Dict[str, Union[str, int]]] = []

    def load(self, source: RDFSource, rdf_format: str = "turtle") -> int:
        """
        Load a file path or open file object into the store
        Returns the number of triples added
        """
        if isinstance(source, (str, Path)):
            return self.load_file(source, rdf_format)

        name = getattr(source, "name", "<stream>")
        return self._parse(name, rdf_format, source=source)

    def load_file(self, file_path: Union[str, Path], rdf_format: str = "turtle") -> int:
        """Load an RDF file from disk"""

        if not Path(file_path).exists():
            logger.error(f"RDF file not found: {file_path}")
            raise OntologyLoadError(f"RDF file not found: {file_path}")

        logger.info(f"Loading {rdf_format} from {file_path}")
        return self._parse(str(file_path), rdf_format, source=str(file_path))

    def load_text(self, data: str, rdf_format: str = "turtle") -> int:
        """Load RDF given as a string"""
        return self._parse("<string>", rdf_format, data=data)

    def load_files(self, file_paths: List[Union[str, Path]], rdf_format: str = "turtle") -> int:
        """Load several files in order, stopping at the first failure"""
        return sum(self.load_file(file_path, rdf_format) for file_path in file_paths)

    def _parse(self, name: str, rdf_format: str, **parse_args) -> int:
        before = len(self.store)
        try:
            self.store.parse(format=rdf_format, **parse_args)
        except Exception as e:
            logger.error(f"Failed to parse {name}: {e}")
            raise OntologyLoadError(f"Failed to parse {name}: {e}") from e

        added = len(self.store) - before
        self.files_loaded.append({"file": name, "triples": added})
        logger.info(f"Parsed {added} triples from {name} ({len(self.store)} total)")
        return added
