"""Version information for the operator and the components it uses."""

from __future__ import annotations

import os
import platform
from collections.abc import Mapping
from dataclasses import dataclass

_OPERATOR_VERSION_ENV = "OPERATOR_VERSION"
_BUILD_DATE_ENV = "VERSION_DATE"
_DEFAULT_JAEGER_ENV = "JAEGER_VERSION"


@dataclass(frozen=True)
class Version:
    """The operator's version and the versions of some of its components."""

    operator: str
    build_date: str
    jaeger: str
    python: str

    def __str__(self) -> str:
        return (
            f"Version(Operator='{self.operator}', BuildDate='{self.build_date}', "
            f"Jaeger='{self.jaeger}', Python='{self.python}')"
        )


def default_jaeger() -> str:
    """Return the Jaeger version used when none is configured."""
    return os.environ.get(_DEFAULT_JAEGER_ENV, "")


def get(config: Mapping[str, object] | None = None) -> Version:
    """Return the version information, honouring a configured ``jaeger-version``."""
    if config is not None and "jaeger-version" in config:
        jaeger = str(config["jaeger-version"])
    else:
        jaeger = default_jaeger()

    return Version(
        operator=os.environ.get(_OPERATOR_VERSION_ENV, ""),
        build_date=os.environ.get(_BUILD_DATE_ENV, ""),
        jaeger=jaeger,
        python=platform.python_version(),
    )