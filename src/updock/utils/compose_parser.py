"""Extract build contexts from a Docker Compose file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

import yaml

from updock.config.settings import settings
from updock.core.errors import (
    MalformedComposeFile,
    MissingField,
    UnsupportedBuildContext,
)
from updock.models.image import Image


@dataclass(frozen=True)
class FolderContext:
    path: Path


@dataclass(frozen=True)
class ImageContext:
    image: Image
    pattern: str | None = None


BuildContext = Union[FolderContext, ImageContext]


def parse_compose(text: str) -> list[tuple[str, BuildContext]]:
    """Return ``(service_name, build_context)`` pairs in file order."""
    try:
        root = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MalformedComposeFile(str(e)) from e

    if not isinstance(root, dict):
        raise MalformedComposeFile()
    if "services" not in root:
        raise MissingField("services")
    services = root["services"]
    if not isinstance(services, dict):
        raise MalformedComposeFile("`services` must be a mapping")

    result: list[tuple[str, BuildContext]] = []
    for name, service in services.items():
        name = str(name)
        if not isinstance(service, dict):
            raise MalformedComposeFile(f"service `{name}` must be a mapping")
        result.append((name, _build_context(name, service)))
    return result


def _build_context(name: str, service: dict[str, Any]) -> BuildContext:
    build = service.get("build")
    image = service.get("image")
    if isinstance(build, str):
        return FolderContext(Path(build))
    if isinstance(image, str):
        return ImageContext(image=Image.parse(image), pattern=_label(service.get("labels"), settings.pattern_label))
    raise UnsupportedBuildContext(name)


def _label(labels: Any, key: str) -> str | None:
    """Read a label from either the mapping or the ``KEY=VALUE`` list form."""
    if isinstance(labels, dict):
        value = labels.get(key)
        return str(value) if value is not None else None
    if isinstance(labels, list):
        for entry in labels:
            k, sep, v = str(entry).partition("=")
            if sep and k.strip() == key:
                return v.strip()
    return None
