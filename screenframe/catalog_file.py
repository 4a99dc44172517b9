"""Device catalog files: save / load a catalog as JSON.

Layout::

    {
      "version": 1,
      "devices": [ DeviceProfile.to_dict(), ... ]
    }

Loaded catalogs are validated by the dataclass constructors, so a file
with bad insets or a device without colours is rejected as a whole.
"""

import json
import logging
from typing import Sequence, Tuple

from .devices import DeviceProfile

logger = logging.getLogger(__name__)

CATALOG_EXT = ".json"
CATALOG_VERSION = 1


def save_catalog(output_path: str, catalog: Sequence[DeviceProfile]) -> str:
    """Write *catalog* to *output_path*; returns the final path."""
    if not output_path.lower().endswith(CATALOG_EXT):
        output_path += CATALOG_EXT

    data = {
        "version": CATALOG_VERSION,
        "devices": [p.to_dict() for p in catalog],
    }
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(json.dumps(data, indent=2))
    return output_path


def load_catalog(input_path: str) -> Tuple[DeviceProfile, ...]:
    """Read a catalog file.  Raises ``ValueError`` for invalid content."""
    with open(input_path, "r", encoding="utf-8") as f:
        try:
            data = json.loads(f.read())
        except json.JSONDecodeError as exc:
            raise ValueError(f"Not a valid catalog file: {input_path}") from exc

    if not isinstance(data, dict) or "devices" not in data:
        raise ValueError(f"Catalog file missing 'devices': {input_path}")
    version = data.get("version", CATALOG_VERSION)
    if version != CATALOG_VERSION:
        raise ValueError(f"Unsupported catalog version {version}")

    try:
        catalog = tuple(DeviceProfile.from_dict(d) for d in data["devices"])
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Malformed device entry in {input_path}: {exc}") from exc

    ids = [p.id for p in catalog]
    if len(ids) != len(set(ids)):
        raise ValueError(f"Duplicate device ids in {input_path}")

    logger.info("Loaded %d device(s) from %s", len(catalog), input_path)
    return catalog
