import pytest

from nirsviz.buffer_layout import (
    BufferElement,
    BufferLayout,
    ShaderDataType,
    shader_data_type_size,
)


@pytest.mark.parametrize(
    ("data_type", "size"),
    [
        (ShaderDataType.FLOAT, 4),
        (ShaderDataType.FLOAT3, 4 * 3),
        (ShaderDataType.MAT3, 4 * 3 * 3),
        (ShaderDataType.MAT4, 4 * 4 * 4),
        (ShaderDataType.INT2, 4 * 2),
        (ShaderDataType.BOOL, 1),
    ],
)
def test_type_sizes(data_type, size):
    assert shader_data_type_size(data_type) == size


def test_unknown_type_rejected():
    with pytest.raises(ValueError, match="Unknown ShaderDataType!"):
        shader_data_type_size(ShaderDataType.NONE)
    with pytest.raises(ValueError):
        BufferElement(ShaderDataType.NONE, "bad")


def test_component_counts_match_shape():
    assert BufferElement(ShaderDataType.MAT4, "m").component_count() == 4
    assert BufferElement(ShaderDataType.INT3, "i").component_count() == 3
    assert BufferElement(ShaderDataType.BOOL, "b").component_count() == 1


def test_element_defaults():
    element = BufferElement(ShaderDataType.FLOAT2, "a_UV")
    assert element.name == "a_UV"
    assert element.normalized is False
    assert element.offset == 0
    assert element.size == shader_data_type_size(ShaderDataType.FLOAT2)


def test_layout_offsets_are_cumulative():
    layout = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "a_Position"),
            BufferElement(ShaderDataType.FLOAT4, "a_Color"),
            BufferElement(ShaderDataType.FLOAT2, "a_UV", True),
        ]
    )
    elements = list(layout)
    assert len(layout) == 3
    assert elements[0].offset == 0
    for previous, current in zip(elements, elements[1:]):
        assert current.offset == previous.offset + previous.size
    assert layout.stride == sum(e.size for e in elements)
    assert elements[2].normalized is True


def test_empty_layout():
    layout = BufferLayout()
    assert len(layout) == 0
    assert layout.stride == 0