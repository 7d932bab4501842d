"""Tests for using nodes as Pydantic field types."""

import json

import pytest
from pydantic import BaseModel, ValidationError

from valueschema.nodes import List, Mapping, MappingNode, Node, Scalar


class FormDefinition(BaseModel):
    title: str
    document: MappingNode


class FieldDefinition(BaseModel):
    name: str
    node: Node


class TestPydanticIntegration:
    """Test Node.__get_pydantic_core_schema__."""

    def test_accepts_instance(self):
        document = Mapping(name=Scalar())
        form = FormDefinition(title="Signup", document=document)

        assert form.document is document

    def test_rejects_other_variant(self):
        with pytest.raises(ValidationError):
            FormDefinition(title="Signup", document=Scalar())

    def test_rejects_plain_mapping(self):
        with pytest.raises(ValidationError):
            FormDefinition(title="Signup", document={"name": Scalar()})

    def test_base_class_accepts_any_node(self):
        assert FieldDefinition(name="a", node=Scalar()).node == Scalar()
        assert FieldDefinition(name="b", node=List(Scalar())).node == List(Scalar())

    def test_json_dump_uses_string_form(self):
        document = Mapping(name=Scalar(), age=Scalar(type="number"))
        form = FormDefinition(title="Signup", document=document)

        dumped = json.loads(form.model_dump_json())

        assert dumped["title"] == "Signup"
        assert dumped["document"] == repr(document)

    def test_python_dump_keeps_node(self):
        document = Mapping(name=Scalar())
        form = FormDefinition(title="Signup", document=document)

        assert form.model_dump()["document"] == document
