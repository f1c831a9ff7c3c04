"""Configuração de fixtures para testes."""

from collections.abc import Mapping
from typing import Any
from unittest.mock import Mock

import pytest

from caching_configurer.constants import ENABLE_CACHING_ANNOTATION


class FakeAnnotationMetadata:
    """Metadados em memória de uma classe importadora."""

    def __init__(self, class_name: str, annotations: dict[str, Mapping[str, Any]] | None = None) -> None:
        self._class_name = class_name
        self._annotations = annotations or {}
        self.lookups: list[str] = []

    @property
    def class_name(self) -> str:
        return self._class_name

    def get_annotation_attributes(self, annotation_name: str) -> Mapping[str, Any] | None:
        self.lookups.append(annotation_name)
        return self._annotations.get(annotation_name)


@pytest.fixture
def declared_attributes() -> dict[str, Any]:
    """Atributos declarados na diretiva."""
    return {"proxy_target_class": False, "mode": "proxy", "order": 10}


@pytest.fixture
def annotated_metadata(declared_attributes: dict[str, Any]) -> FakeAnnotationMetadata:
    """Metadados de uma classe que carrega a diretiva."""
    return FakeAnnotationMetadata(
        "app.config.CacheConfig",
        {ENABLE_CACHING_ANNOTATION: declared_attributes},
    )


@pytest.fixture
def bare_metadata() -> FakeAnnotationMetadata:
    """Metadados de uma classe sem a diretiva."""
    return FakeAnnotationMetadata("app.config.PlainConfig", {"other.Annotation": {"value": 1}})


@pytest.fixture
def collaborators() -> dict[str, Mock]:
    """Colaboradores distintos retornados por um configurer."""
    return {
        "cache_manager": Mock(name="mgrX"),
        "cache_resolver": Mock(name="resolverY"),
        "key_generator": Mock(name="keyGenZ"),
        "error_handler": Mock(name="handlerW"),
    }


@pytest.fixture
def configurer(collaborators: dict[str, Mock]) -> Mock:
    """Configurer cujos accessors retornam os colaboradores."""
    mock_configurer = Mock(name="configurer")
    for accessor, collaborator in collaborators.items():
        getattr(mock_configurer, accessor).return_value = collaborator
    return mock_configurer


@pytest.fixture
def metadata_factory() -> type[FakeAnnotationMetadata]:
    """Fábrica de metadados de classes importadoras."""
    return FakeAnnotationMetadata
