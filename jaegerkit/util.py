"""Helpers for merging common specs and building Kubernetes metadata.

Kubernetes objects are handled as plain manifest dictionaries, the way they
appear in YAML or JSON (``{"metadata": {"name": ...}, ...}``).
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_DECIMAL = re.compile(r"[+-]?[0-9]+")


@dataclass
class CommonSpec:
    """Settings shared by every Jaeger component."""

    annotations: dict[str, str] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)
    volume_mounts: list[dict[str, Any]] = field(default_factory=list)
    volumes: list[dict[str, Any]] = field(default_factory=list)
    resources: dict[str, dict[str, Any]] = field(default_factory=dict)
    affinity: Any = None
    tolerations: list[Any] = field(default_factory=list)
    security_context: Any = None
    service_account: str = ""


def _unique_by_name(items: Iterable[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    seen: set[Any] = set()
    unique = []
    for item in items:
        name = item.get("name")
        if name in seen:
            continue
        seen.add(name)
        unique.append(item)
    return unique


def remove_duplicated_volumes(volumes):
    """Return the volumes with unique names, keeping the first of each."""
    return _unique_by_name(volumes)


def remove_duplicated_volume_mounts(volume_mounts):
    """Return the volume mounts with unique names, keeping the first of each."""
    return _unique_by_name(volume_mounts)


def _merge_resources(target: dict[str, dict[str, Any]], source: Mapping[str, Mapping[str, Any]]) -> None:
    for section in ("limits", "requests"):
        for key, value in (source.get(section) or {}).items():
            target.setdefault(section, {}).setdefault(key, value)


def merge(common_specs):
    """Merge common specs, the most specific first, into a new ``CommonSpec``."""
    annotations: dict[str, str] = {}
    labels: dict[str, str] = {}
    volume_mounts: list[dict[str, Any]] = []
    volumes: list[dict[str, Any]] = []
    resources: dict[str, dict[str, Any]] = {}
    affinity = None
    tolerations: list[Any] = []
    security_context = None
    service_account = ""

    for spec in common_specs:
        for key, value in (spec.annotations or {}).items():
            annotations.setdefault(key, value)
        for key, value in (spec.labels or {}).items():
            labels.setdefault(key, value)

        volume_mounts.extend(spec.volume_mounts or ())
        volumes.extend(spec.volumes or ())
        _merge_resources(resources, spec.resources or {})

        if affinity is None:
            affinity = spec.affinity

        tolerations.extend(spec.tolerations or ())

        if security_context is None:
            security_context = spec.security_context

        if not service_account:
            service_account = spec.service_account

    return CommonSpec(
        annotations=annotations,
        labels=labels,
        volume_mounts=remove_duplicated_volume_mounts(volume_mounts),
        volumes=remove_duplicated_volumes(volumes),
        resources=resources,
        affinity=affinity,
        tolerations=tolerations,
        security_context=security_context,
        service_account=service_account,
    )


def as_owner(jaeger):
    """Return an owner reference pointing at the given Jaeger manifest."""
    metadata = jaeger.get("metadata") or {}
    return {
        "apiVersion": jaeger.get("apiVersion", ""),
        "kind": jaeger.get("kind", ""),
        "name": metadata.get("name", ""),
        "uid": metadata.get("uid", ""),
        "controller": True,
    }


def labels(name, component, jaeger):
    """Return the recommended labels for a component of a Jaeger instance."""
    instance = (jaeger.get("metadata") or {}).get("name", "")
    return {
        "app": "jaeger",
        "app.kubernetes.io/name": name,
        "app.kubernetes.io/instance": instance,
        "app.kubernetes.io/component": component,
        "app.kubernetes.io/part-of": "jaeger",
        "app.kubernetes.io/managed-by": "jaeger-operator",
    }


def get_es_hostname(opts):
    """Return the first Elasticsearch URL from the options, or an empty string."""
    if not opts or "es.server-urls" not in opts:
        return ""
    return opts["es.server-urls"].split(",")[0]


def find_item(prefix, args):
    """Return the first argument starting with ``prefix``, or an empty string."""
    return next((arg for arg in args if arg.startswith(prefix)), "")


def get_port(arg, args, port):
    """Return the port given after ``:`` in the matching argument, else ``port``."""
    port_arg = find_item(arg, args)
    _, colon, value = port_arg.partition(":")
    if colon and _DECIMAL.fullmatch(value):
        parsed = int(value)
        if _INT32_MIN <= parsed <= _INT32_MAX:
            return parsed
    return port


def init_object_meta(obj: MutableMapping[str, Any]) -> None:
    """Make sure the object's metadata holds label and annotation maps."""
    metadata = obj.get("metadata")
    if metadata is None:
        metadata = obj["metadata"] = {}
    if metadata.get("labels") is None:
        metadata["labels"] = {}
    if metadata.get("annotations") is None:
        metadata["annotations"] = {}