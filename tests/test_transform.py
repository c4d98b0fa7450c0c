import copy
from pathlib import Path

import yaml

from oas_view.normalizer.transform import transform_result

FIXTURES = Path(__file__).parent / "fixtures"


def _load(name: str) -> dict:
    return yaml.safe_load((FIXTURES / name).read_text(encoding="utf-8"))


class TestTransformPetstore:
    def test_tag_order_and_pruning(self):
        spec = transform_result(_load("petstore.yaml"))
        # "store" is declared but unused, "admin" is only referenced by an operation
        assert [t.name for t in spec.tags] == ["pets", "default", "admin"]
        assert all(t.operations for t in spec.tags)

    def test_declared_description_survives(self):
        spec = transform_result(_load("petstore.yaml"))
        assert spec.tags[0].description == "Everything about your pets"

    def test_tag_operations_match_paths(self):
        spec = transform_result(_load("petstore.yaml"))
        for tag in spec.tags:
            for op in tag.operations:
                assert spec.paths[op.path][op.http_verb] == op

    def test_multi_tag_operation_in_each_bucket(self):
        spec = transform_result(_load("petstore.yaml"))
        tags = {t.name: t for t in spec.tags}
        create = spec.paths["/pets"]["post"]
        assert create in tags["pets"].operations
        assert tags["admin"].operations == [create]
        assert create.operation_id == "/pets"
        assert create.name == "Create a pet"

    def test_untagged_operation_in_default(self):
        spec = transform_result(_load("petstore.yaml"))
        default = next(t for t in spec.tags if t.name == "default")
        assert [(op.http_verb, op.path) for op in default.operations] == [("get", "/health")]
        assert default.operations[0].name == "/health"

    def test_path_parameters_and_extra_keys(self):
        spec = transform_result(_load("petstore.yaml"))
        item = spec.paths["/pets/{petId}"]
        assert item["summary"] == "A single pet"
        assert item["get"].path_parameters == item["parameters"]
        assert item["get"].description == "Returns one pet"

    def test_other_fields_pass_through(self):
        document = _load("petstore.yaml")
        spec = transform_result(document)
        assert spec.model_extra["info"] == document["info"]
        assert spec.model_extra["servers"] == document["servers"]
        assert spec.model_extra["openapi"] == "3.0.0"
        assert spec.webhooks == {}

    def test_idempotent_on_fresh_copies(self):
        document = _load("petstore.yaml")
        first = transform_result(copy.deepcopy(document))
        second = transform_result(copy.deepcopy(document))
        assert first.to_dict() == second.to_dict()

    def test_does_not_modify_input(self):
        document = _load("petstore.yaml")
        snapshot = copy.deepcopy(document)
        transform_result(document)
        assert document == snapshot


class TestTransformWebhookDocument:
    def test_webhook_not_in_tags(self):
        spec = transform_result(_load("webhooks.yaml"))
        assert spec.webhooks["newPet"]["post"].name == "New pet webhook"
        for tag in spec.tags:
            assert all(op.path != "newPet" for op in tag.operations)

    def test_bare_webhook_document(self):
        spec = transform_result({"webhooks": {"newPet": {"post": {"summary": "New pet webhook"}}}})
        assert spec.webhooks["newPet"]["post"].name == "New pet webhook"
        assert spec.tags == []
        assert spec.paths == {}


class TestTransformEdgeCases:
    def test_empty_document(self):
        spec = transform_result({})
        assert spec.tags == []
        assert spec.paths == {}
        assert spec.webhooks == {}

    def test_unknown_method_key(self):
        spec = transform_result({"paths": {"/pets": {"foo": {"summary": "x"}}}})
        assert spec.tags == []
        assert spec.paths["/pets"] == {"foo": {"summary": "x"}}

    def test_swagger_2_document(self):
        spec = transform_result(_load("swagger.yaml"))
        assert [t.name for t in spec.tags] == ["users"]
        assert spec.paths["/users"]["get"].operation_id == "listUsers"
        assert spec.model_extra["basePath"] == "/v1"

    def test_serialized_output(self):
        data = transform_result(_load("petstore.yaml")).to_dict()
        get_pets = data["paths"]["/pets"]["get"]
        assert get_pets["httpVerb"] == "get"
        assert get_pets["operationId"] == "listPets"
        assert get_pets["information"]["parameters"][0]["name"] == "limit"
        assert data["tags"][0]["operations"][0] == get_pets

    def test_extension_entry_in_paths(self):
        spec = transform_result({"openapi": "3.1.0", "paths": {"x-internal": True, "/pets": {"get": {}}}})
        assert spec.paths["x-internal"] is True
        assert [t.name for t in spec.tags] == ["default"]
        assert spec.to_dict()["paths"]["x-internal"] is True

    def test_webhooks_kept_for_openapi_3_0(self):
        spec = transform_result({"openapi": "3.0.3", "webhooks": {"newPet": {"post": {"summary": "New pet"}}}})
        assert spec.webhooks["newPet"]["post"].name == "New pet"
        assert spec.tags == []
