import pytest


ONTOLOGY_TTL = """
@prefix brick: <https://brickschema.org/schema/Brick#> .
@prefix owl: <http://www.w3.org/2002/07/owl#> .
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .

brick:Equipment a owl:Class .
brick:Location a owl:Class .
brick:Point a owl:Class ;
    rdfs:subClassOf brick:Equipment .
brick:Sensor a owl:Class ;
    rdfs:subClassOf brick:Point .
brick:Temp_Sensor a owl:Class ;
    owl:equivalentClass brick:Sensor .
brick:feeds a owl:ObjectProperty .
brick:hasLocation a owl:ObjectProperty .
"""


DATA_TTL = """
@prefix brick: <https://brickschema.org/schema/Brick#> .
@prefix ex: <http://example.org/building#> .

ex:x a brick:Point .
ex:y a brick:Equipment .
ex:x brick:feeds ex:y .
"""


@pytest.fixture
def ontology_file(tmp_path):
    path = tmp_path / "ontology.ttl"
    path.write_text(ONTOLOGY_TTL, encoding="utf-8")
    return path


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.ttl"
    path.write_text(DATA_TTL, encoding="utf-8")
    return path
