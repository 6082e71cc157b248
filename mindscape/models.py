"""
Palace data models.

Typed, immutable view of the JSON returned by the content-processing
service. Attribute names match the snake_case wire fields.
"""

from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from mindscape.errors import DecodingError

Vector3 = Tuple[float, float, float]


class PalaceModel(BaseModel):
    """
    Base model for all palace payloads.

    Unknown fields sent by the server are ignored. Strict mode: "0.5" is
    not a number and true is not 1.0.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    @classmethod
    def from_json(cls, data: Union[str, bytes]):
        """
        Decode a service response body.

        Args:
            data: Raw JSON body

        Returns:
            Instance of the calling model

        Raises:
            DecodingError: body is not JSON or does not match the model shape
        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise DecodingError(_describe_validation_error(e)) from e


class ObjectType(str, Enum):
    """Shapes a decorative environment object can take."""

    BOX = "box"
    CYLINDER = "cylinder"
    SPHERE = "sphere"


class EnvironmentTheme(PalaceModel):
    """Theme picked by the server for the document."""
    theme: str
    description: Optional[str] = None
    rationale: Optional[str] = None
    confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class EnvironmentObject(PalaceModel):
    """Decorative scene element (pillar, table, globe...)."""
    type: str
    name: Optional[str] = None
    position: Vector3
    rotation: Vector3
    size: Optional[Vector3] = None
    radius: Optional[float] = None
    height: Optional[float] = None
    texture_url: Optional[str] = None

    @property
    def shape(self) -> Optional[ObjectType]:
        """Known shape for ``type``, or None for types this client cannot draw."""
        try:
            return ObjectType(self.type.lower())
        except ValueError:
            return None

    @property
    def is_renderable(self) -> bool:
        """Whether the shape parameters required by ``type`` are present."""
        shape = self.shape
        if shape is ObjectType.BOX:
            return self.size is not None
        if shape is ObjectType.CYLINDER:
            return self.radius is not None and self.height is not None
        if shape is ObjectType.SPHERE:
            return self.radius is not None
        return False


class EnvironmentConfig(PalaceModel):
    """Scene dressing: textures, skybox and decorative objects."""
    theme: str
    theme_name: Optional[str] = None
    description: Optional[str] = None
    floor_texture: Optional[str] = None
    skybox: Optional[str] = None
    objects: Optional[Tuple[EnvironmentObject, ...]] = None

    def renderable_objects(self) -> Tuple[EnvironmentObject, ...]:
        """Objects that carry every shape parameter their type needs."""
        return tuple(obj for obj in self.objects or () if obj.is_renderable)


class Concept(PalaceModel):
    """One learning unit placed in the palace."""
    id: str
    name: str
    description: str
    mnemonic_prompt: str
    audio_script: str
    key_facts: Tuple[str, ...]
    connections: Tuple[str, ...]
    image_url: Optional[str] = None
    audio_url: Optional[str] = None
    position: Optional[Vector3] = None

    @field_validator("position", mode="before")
    @classmethod
    def position_from_object(cls, v):
        """Accept the legacy {"x": .., "y": .., "z": ..} form."""
        if isinstance(v, dict):
            try:
                return (v["x"], v["y"], v["z"])
            except KeyError as e:
                raise ValueError(f"position object missing {e.args[0]!r}")
        if isinstance(v, list):
            # strict mode only takes tuples once a before-validator ran
            return tuple(v)
        return v


class Palace(PalaceModel):
    """
    Learning content returned for an uploaded document.

    Built once per successful upload and never modified afterwards.
    """
    title: str
    environment_theme: EnvironmentTheme
    environment_config: Optional[EnvironmentConfig] = None
    concepts: Tuple[Concept, ...]
    learning_path: Tuple[str, ...]
    music_session_id: Optional[str] = None

    @model_validator(mode="after")
    def unique_concept_ids(self) -> "Palace":
        seen = set()
        for concept in self.concepts:
            if concept.id in seen:
                raise ValueError(f"duplicate concept id {concept.id!r}")
            seen.add(concept.id)
        return self

    @classmethod
    def loading_placeholder(cls) -> "Palace":
        """Empty palace shown while the real one is being built."""
        return cls(
            title="Constructing Palace...",
            environment_theme=EnvironmentTheme(theme="library"),
            concepts=(),
            learning_path=(),
        )

    def concept_by_id(self, concept_id: str) -> Optional[Concept]:
        for concept in self.concepts:
            if concept.id == concept_id:
                return concept
        return None

    def learning_path_concepts(self) -> Tuple[Concept, ...]:
        """Concepts in learning-path order. Unknown ids are skipped."""
        by_id = {concept.id: concept for concept in self.concepts}
        return tuple(by_id[cid] for cid in self.learning_path if cid in by_id)


class ChatReply(PalaceModel):
    """Body of a /chat/concept response."""
    response: str


def _describe_validation_error(error: ValidationError) -> str:
    """Condense a pydantic error into 'loc: msg; loc: msg'."""
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {item.get('msg')}")
    return "; ".join(parts)
