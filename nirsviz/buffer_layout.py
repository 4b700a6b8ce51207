"""Vertex buffer element types and the layouts built from them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum


class ShaderDataType(Enum):
    NONE = 0
    FLOAT = 1
    FLOAT2 = 2
    FLOAT3 = 3
    FLOAT4 = 4
    MAT3 = 5
    MAT4 = 6
    INT = 7
    INT2 = 8
    INT3 = 9
    INT4 = 10
    BOOL = 11


_SIZES = {
    ShaderDataType.FLOAT: 4,
    ShaderDataType.FLOAT2: 4 * 2,
    ShaderDataType.FLOAT3: 4 * 3,
    ShaderDataType.FLOAT4: 4 * 4,
    ShaderDataType.MAT3: 4 * 3 * 3,
    ShaderDataType.MAT4: 4 * 4 * 4,
    ShaderDataType.INT: 4,
    ShaderDataType.INT2: 4 * 2,
    ShaderDataType.INT3: 4 * 3,
    ShaderDataType.INT4: 4 * 4,
    ShaderDataType.BOOL: 1,
}

_COMPONENTS = {
    ShaderDataType.FLOAT: 1,
    ShaderDataType.FLOAT2: 2,
    ShaderDataType.FLOAT3: 3,
    ShaderDataType.FLOAT4: 4,
    ShaderDataType.MAT3: 3,
    ShaderDataType.MAT4: 4,
    ShaderDataType.INT: 1,
    ShaderDataType.INT2: 2,
    ShaderDataType.INT3: 3,
    ShaderDataType.INT4: 4,
    ShaderDataType.BOOL: 1,
}


def shader_data_type_size(data_type: ShaderDataType) -> int:
    """Return the size in bytes of one value of ``data_type``."""
    try:
        return _SIZES[data_type]
    except KeyError:
        raise ValueError("Unknown ShaderDataType!") from None


@dataclass
class BufferElement:
    """One attribute of a vertex, with its byte size and offset."""

    data_type: ShaderDataType
    name: str
    normalized: bool = False
    size: int = field(init=False, default=0)
    offset: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.size = shader_data_type_size(self.data_type)

    def component_count(self) -> int:
        """Number of components the attribute is made of."""
        try:
            return _COMPONENTS[self.data_type]
        except KeyError:
            raise ValueError("Unknown ShaderDataType!") from None


class BufferLayout:
    """Ordered vertex elements with computed offsets and stride."""

    def __init__(self, elements: Iterable[BufferElement] = ()) -> None:
        self.elements: list[BufferElement] = list(elements)
        self.stride = 0
        for element in self.elements:
            element.offset = self.stride
            self.stride += element.size

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)