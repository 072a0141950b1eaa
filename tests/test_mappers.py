"""
Tests for the entity/DTO mappers in `arsatoll_api.app.mappers`.
"""

import pytest

from arsatoll_api.app.domain import Chercheur, Famille, Ordre
from arsatoll_api.app.mappers import ChercheurMapper, FamilleMapper, OrdreMapper
from arsatoll_api.app.schemas import ChercheurDTO, FamilleDTO, OrdreDTO


@pytest.mark.parametrize(
    "mapper, dto",
    [
        (OrdreMapper(), OrdreDTO(id=4, nom_ordre="Coleoptera", description="Beetles", image_ordre="coleo.png")),
        (OrdreMapper(), OrdreDTO(nom_ordre="Diptera")),
        (FamilleMapper(), FamilleDTO(id=7, nom_famille="Carabidae", image_famiile="cara.png", ordre_id=4)),
        (FamilleMapper(), FamilleDTO(nom_famille="Carabidae")),
        (ChercheurMapper(), ChercheurDTO(id=2, nom="Kaci", prenom="Amina", email="a.kaci@example.org")),
    ],
)
def test_to_dto_inverts_to_entity(mapper, dto):
    """
    Mapping a DTO to an entity and back gives the same attribute values.
    DTO equality is identity based, so the comparison uses the dumps.
    """
    assert mapper.to_dto(mapper.to_entity(dto)).model_dump() == dto.model_dump()


def test_to_dto_copies_fields():
    ordre = Ordre(id=1, nom_ordre="Coleoptera", description="Beetles", image_ordre="coleo.png")
    ordre_dto = OrdreMapper().to_dto(ordre)
    assert isinstance(ordre_dto, OrdreDTO)
    assert ordre_dto.model_dump() == {
        "id": 1,
        "nom_ordre": "Coleoptera",
        "description": "Beetles",
        "image_ordre": "coleo.png",
    }


def test_famille_to_dto_copies_reference_as_id():
    famille = Famille(id=5, nom_famille="Carabidae", ordre=Ordre(id=9, nom_ordre="Coleoptera"))
    famille_dto = FamilleMapper().to_dto(famille)
    assert famille_dto.ordre_id == 9


def test_famille_to_dto_without_reference():
    assert FamilleMapper().to_dto(Famille(id=5, nom_famille="Carabidae")).ordre_id is None


def test_famille_to_entity_builds_reference_stub():
    famille = FamilleMapper().to_entity(FamilleDTO(id=5, nom_famille="Carabidae", ordre_id=9))
    assert famille.ordre == Ordre(id=9)
    assert famille.ordre.nom_ordre is None


def test_famille_to_entity_without_reference():
    assert FamilleMapper().to_entity(FamilleDTO(nom_famille="Carabidae")).ordre is None


@pytest.mark.parametrize("mapper, entity_class", [
    (OrdreMapper(), Ordre),
    (FamilleMapper(), Famille),
    (ChercheurMapper(), Chercheur),
])
def test_entity_from_id(mapper, entity_class):
    stub = mapper.from_id(42)
    assert isinstance(stub, entity_class)
    assert stub.id == 42
    assert mapper.from_id(None) is None


def test_list_conversions():
    mapper = ChercheurMapper()
    chercheurs = [Chercheur(id=1, nom="Kaci"), Chercheur(id=2, nom="Amrouche")]
    dtos = mapper.to_dto_list(chercheurs)
    assert [dto.nom for dto in dtos] == ["Kaci", "Amrouche"]
    assert mapper.to_entity_list(dtos) == chercheurs
