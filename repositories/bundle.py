"""
Bundle Decoder

Loads a named resource from the packaged data directory and decodes it
into a requested shape.

The bundled documents are part of the shipped build, not user input, so
there is no recoverable path: a missing file, invalid JSON, or a
document of the wrong shape raises a StartupDataFault subclass and the
caller decides how to abort.

Design:
- Shape objects pair a name with a converter from the raw JSON document
- decode() never returns a partial result
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Generic, Mapping, TypeVar

from domain.converters import require_mapping
from domain.errors import DataDecodeError, ResourceNotFoundError
from domain.models import Astronaut, Mission
from logging_config import setup_logging

logger = setup_logging(__name__, log_file="bundle.log")

T = TypeVar("T")


@dataclass(frozen=True)
class Shape(Generic[T]):
    """A target shape for decode(): a name for messages plus a converter."""
    name: str
    convert: Callable[[Any], T]


def _to_astronaut_map(document: Any) -> Mapping[str, Astronaut]:
    """Decode ``{id: {id, name, description}}`` keyed by astronaut id."""
    document = require_mapping(document, "astronaut document")
    astronauts: dict[str, Astronaut] = {}
    for key, raw in document.items():
        try:
            astronaut = Astronaut.from_dict(raw)
        except DataDecodeError as e:
            raise DataDecodeError(f"astronaut '{key}': {e}") from e
        if astronaut.id != key:
            raise DataDecodeError(f"astronaut '{key}': id field is '{astronaut.id}'")
        astronauts[key] = astronaut
    return astronauts


def _to_mission_list(document: Any) -> tuple[Mission, ...]:
    """Decode a JSON array of missions, keeping document order."""
    if not isinstance(document, list):
        raise DataDecodeError(f"mission document: expected a list, got {type(document).__name__}")
    missions = []
    for index, raw in enumerate(document):
        try:
            missions.append(Mission.from_dict(raw))
        except DataDecodeError as e:
            raise DataDecodeError(f"mission #{index}: {e}") from e
    seen = set()
    for mission in missions:
        if mission.id in seen:
            raise DataDecodeError(f"duplicate mission id {mission.id}")
        seen.add(mission.id)
    return tuple(missions)


AstronautMap: Shape[Mapping[str, Astronaut]] = Shape("astronaut map", _to_astronaut_map)
MissionList: Shape[tuple[Mission, ...]] = Shape("mission list", _to_mission_list)


class BundleDecoder:
    """
    Decodes resources that ship inside the app's data directory.

    Attributes:
        bundle_dir: Directory holding the packaged documents
    """

    def __init__(self, bundle_dir: str | Path):
        self.bundle_dir = Path(bundle_dir)

    def locate(self, resource: str) -> Path:
        """Return the path of a packaged resource, or raise ResourceNotFoundError."""
        path = self.bundle_dir / resource
        if not path.is_file():
            raise ResourceNotFoundError(
                f"Failed to locate {resource} in bundle {self.bundle_dir}", resource=resource
            )
        return path

    def decode(self, resource: str, shape: Shape[T]) -> T:
        """
        Load ``resource`` and decode it into ``shape``.

        Args:
            resource: File name inside the bundle (e.g. "missions.json")
            shape: Target shape (AstronautMap or MissionList)

        Returns:
            The decoded value

        Raises:
            ResourceNotFoundError: If the resource is not in the bundle
            DataDecodeError: If it is not valid JSON or not of the requested shape
        """
        path = self.locate(resource)
        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise DataDecodeError(
                f"Failed to decode {resource} from bundle: invalid JSON ({e})", resource=resource
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise DataDecodeError(f"Failed to read {resource} from bundle: {e}", resource=resource) from e
        # Oversized integer literals and pathological nesting.
        except (ValueError, RecursionError) as e:
            raise DataDecodeError(
                f"Failed to decode {resource} from bundle: unparseable JSON ({e})", resource=resource
            ) from e

        try:
            value = shape.convert(document)
        except DataDecodeError as e:
            raise DataDecodeError(
                f"Failed to decode {resource} as {shape.name}: {e}", resource=resource
            ) from e

        logger.debug("Decoded %s as %s", resource, shape.name)
        return value
