"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Canonicalisation of user-supplied secret paths.

Accepted inputs:
    kv/workshop               KV v2 path without the data segment
    kv/data/workshop          KV v2 path with the data segment
    v1/kv/data/workshop       any of the above with the API version prefix
    database/creds/<role>     dynamic database credentials (optionally v1/-prefixed)

All of them normalise to ``v1/<mount>/data/<rest>`` or ``v1/database/creds/<role>``.
"""

from dataclasses import dataclass

VERSION_PREFIX = "v1/"
DYNAMIC_PREFIX = "database/creds/"
DATA_SEGMENT = "data"


@dataclass(frozen=True)
class SecretPath:
    """Canonical lookup path and whether it addresses dynamic credentials."""

    path: str
    is_dynamic: bool


def normalize_secret_path(raw: str) -> SecretPath:
    """Map a raw secret path to its canonical form. Never raises."""

    path = raw.lstrip("/")
    if path.startswith(VERSION_PREFIX):
        path = path[len(VERSION_PREFIX):]

    if path.startswith(DYNAMIC_PREFIX):
        return SecretPath(path=VERSION_PREFIX + path, is_dynamic=True)

    mount, _, rest = path.partition("/")
    if rest.split("/", 1)[0] == DATA_SEGMENT or f"/{DATA_SEGMENT}/" in path:
        return SecretPath(path=VERSION_PREFIX + path, is_dynamic=False)
    return SecretPath(path=f"{VERSION_PREFIX}{mount}/{DATA_SEGMENT}/{rest}", is_dynamic=False)
