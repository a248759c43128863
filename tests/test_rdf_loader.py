import io

import pytest

from rdf_class_viz.exceptions import OntologyLoadError
from rdf_class_viz.materialization.rdf_loader import RDFLoader

from conftest import DATA_TTL, ONTOLOGY_TTL


def test_loads_are_additive(ontology_file, data_file):
    loader = RDFLoader()
    first = loader.load_file(ontology_file)
    second = loader.load(str(data_file))

    assert first > 0 and second > 0
    assert len(loader.store) == first + second
    assert [entry["file"] for entry in loader.files_loaded] == [str(ontology_file), str(data_file)]


def test_load_files_in_order(ontology_file, data_file):
    loader = RDFLoader()
    total = loader.load_files([ontology_file, data_file])
    assert total == len(loader.store)


def test_load_open_file(ontology_file):
    loader = RDFLoader()
    with open(ontology_file, "rb") as f:
        assert loader.load(f) > 0


def test_load_text():
    loader = RDFLoader()
    assert loader.load_text(DATA_TTL) == 3


def test_load_stream():
    loader = RDFLoader()
    assert loader.load(io.BytesIO(ONTOLOGY_TTL.encode("utf-8"))) > 0


def test_missing_file(tmp_path):
    with pytest.raises(OntologyLoadError):
        RDFLoader().load_file(tmp_path / "missing.ttl")


def test_malformed_turtle(tmp_path):
    path = tmp_path / "broken.ttl"
    path.write_text("@prefix ex: <http://example.org/> .\nex:a ex:b", encoding="utf-8")
    with pytest.raises(OntologyLoadError):
        RDFLoader().load_file(path)
