"""Core glTF 2.0 schema subset used as host entities.

Only the members needed to give extensions somewhere to live are
declared. Each entity's `extensions` object is its own ExtensibleObject
subclass so that registrations can target it (e.g. NodeExtensions).
Every key inside an `extensions` object is unrecognized by construction.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .extensible import ExtensibleObject


class RootExtensions(ExtensibleObject):
    """Host for root-level extensions (`extensions` on the document root)."""


class AssetExtensions(ExtensibleObject):
    """Host for extensions on `asset`."""


class SceneExtensions(ExtensibleObject):
    """Host for extensions on a scene."""


class NodeExtensions(ExtensibleObject):
    """Host for extensions on a node."""


class MeshExtensions(ExtensibleObject):
    """Host for extensions on a mesh."""


class PrimitiveExtensions(ExtensibleObject):
    """Host for extensions on a mesh primitive."""


class MaterialExtensions(ExtensibleObject):
    """Host for extensions on a material."""


class TextureInfoExtensions(ExtensibleObject):
    """Host for extensions on a texture reference (e.g. KHR_texture_transform)."""


class Asset(ExtensibleObject):
    version: str
    generator: Optional[str] = None
    copyright: Optional[str] = None
    min_version: Optional[str] = None
    extensions: Optional[AssetExtensions] = None
    extras: Optional[Any] = None


class Scene(ExtensibleObject):
    name: Optional[str] = None
    nodes: List[int] = Field(default_factory=list)
    extensions: Optional[SceneExtensions] = None
    extras: Optional[Any] = None


class Node(ExtensibleObject):
    name: Optional[str] = None
    children: List[int] = Field(default_factory=list)
    mesh: Optional[int] = None
    camera: Optional[int] = None
    skin: Optional[int] = None
    matrix: Optional[List[float]] = None
    translation: Optional[List[float]] = None
    rotation: Optional[List[float]] = None
    scale: Optional[List[float]] = None
    extensions: Optional[NodeExtensions] = None
    extras: Optional[Any] = None


class MeshPrimitive(ExtensibleObject):
    attributes: Dict[str, int]
    indices: Optional[int] = None
    material: Optional[int] = None
    mode: int = 4  # TRIANGLES
    targets: Optional[List[Dict[str, int]]] = None
    extensions: Optional[PrimitiveExtensions] = None
    extras: Optional[Any] = None


class Mesh(ExtensibleObject):
    name: Optional[str] = None
    primitives: List[MeshPrimitive]
    weights: Optional[List[float]] = None
    extensions: Optional[MeshExtensions] = None
    extras: Optional[Any] = None


class TextureInfo(ExtensibleObject):
    index: int
    tex_coord: int = 0
    extensions: Optional[TextureInfoExtensions] = None
    extras: Optional[Any] = None


class PbrMetallicRoughness(ExtensibleObject):
    base_color_factor: List[float] = Field(default_factory=lambda: [1.0, 1.0, 1.0, 1.0])
    base_color_texture: Optional[TextureInfo] = None
    metallic_factor: float = 1.0
    roughness_factor: float = 1.0
    metallic_roughness_texture: Optional[TextureInfo] = None
    extras: Optional[Any] = None


class Material(ExtensibleObject):
    name: Optional[str] = None
    pbr_metallic_roughness: Optional[PbrMetallicRoughness] = None
    emissive_factor: List[float] = Field(default_factory=lambda: [0.0, 0.0, 0.0])
    alpha_mode: str = "OPAQUE"
    alpha_cutoff: float = 0.5
    double_sided: bool = False
    extensions: Optional[MaterialExtensions] = None
    extras: Optional[Any] = None


class GltfRoot(ExtensibleObject):
    """Document root."""
    asset: Asset
    extensions_used: List[str] = Field(default_factory=list)
    extensions_required: List[str] = Field(default_factory=list)
    scene: Optional[int] = None
    scenes: List[Scene] = Field(default_factory=list)
    nodes: List[Node] = Field(default_factory=list)
    meshes: List[Mesh] = Field(default_factory=list)
    materials: List[Material] = Field(default_factory=list)
    extensions: Optional[RootExtensions] = None
    extras: Optional[Any] = None
