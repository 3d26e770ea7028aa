import pytest

from apps.core.data import ModelDataService
from apps.pos.models import Pos as PosModel
from apps.pos.services import PosDataService


class WithoutFields(ModelDataService):
    model = PosModel
    entity_name = 'POS'

    def to_domain(self, instance):
        return instance


class TestModelDataService:

    def test_mappings_are_required(self):
        with pytest.raises(TypeError):
            WithoutFields()

    def test_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            ModelDataService()

    def test_complete_subclass(self):
        assert PosDataService().entity_name == 'POS'
