import pytest

from quiz_api.schemas.element import ElementIn
from quiz_api.services import elements as element_service
from quiz_api.services.errors import ElementConflict
from tests.testkit import element_payload


def test_unique_index_violation_is_a_conflict(monkeypatch, session):
    element_service.create_element(session, ElementIn.model_validate(element_payload()))

    # another writer inserted the same symbol after our check ran
    monkeypatch.setattr(element_service, "_symbol_taken", lambda *args, **kwargs: False)
    with pytest.raises(ElementConflict) as err:
        element_service.create_element(session, ElementIn.model_validate(element_payload(nome="Ferro II")))
    assert err.value.symbol == "Fe"

    assert [e.symbol for e in element_service.list_elements(session)] == ["Fe"]


def test_update_losing_race_is_a_conflict(monkeypatch, session):
    element_service.create_element(session, ElementIn.model_validate(element_payload()))
    gold = element_service.create_element(
        session, ElementIn.model_validate(element_payload(nome="Ouro", simbolo="Au"))
    )

    monkeypatch.setattr(element_service, "_symbol_taken", lambda *args, **kwargs: False)
    with pytest.raises(ElementConflict):
        element_service.update_element(session, gold.id, ElementIn.model_validate(element_payload(nome="Ouro")))

    assert element_service.get_element(session, gold.id).symbol == "Au"
