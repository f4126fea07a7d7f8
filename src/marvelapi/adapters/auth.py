"""Parámetros de autenticación.

Implementación:
- `apikey` siempre.
- Claves server-side: `ts` + `hash = md5(ts + private_key + public_key)`.

Notas:
- El hash depende del timestamp, así que se recalcula en cada llamada.
"""

from __future__ import annotations

import hashlib
import time

from marvelapi.core.config import Credentials
from marvelapi.core.errors import ConfigurationError


def new_timestamp() -> str:
    return str(int(time.time() * 1000))


def compute_hash(ts: str, private_key: str, public_key: str) -> str:
    # MD5 es el esquema que exige la API (no es un uso criptográfico nuestro).
    return hashlib.md5(f"{ts}{private_key}{public_key}".encode("utf-8")).hexdigest()  # nosec


def auth_params(
    credentials: Credentials,
    *,
    require_hash: bool = True,
    ts: str | None = None,
) -> dict[str, str]:
    params = {"apikey": credentials.public_key}
    if not require_hash:
        return params
    if not credentials.private_key:
        raise ConfigurationError("A private key is required to sign requests")

    ts = ts or new_timestamp()
    params["ts"] = ts
    params["hash"] = compute_hash(ts, credentials.private_key, credentials.public_key)
    return params
