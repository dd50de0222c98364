import base64

import pytest

from image_base64_server.codec import encode


def test_encode_builds_data_url(png_bytes, png_base64):
    """测试编码结果带有data URL前缀。"""
    artifact = encode(png_bytes, "image/png", "pic.png", len(png_bytes))

    assert artifact.text == f"data:image/png;base64,{png_base64}"
    assert artifact.media_type == "image/png"
    assert artifact.source_name == "pic.png"
    assert artifact.source_byte_length == len(png_bytes)
    assert artifact.payload == png_base64


def test_encode_empty_buffer():
    """测试空字节生成零负载的结果。"""
    artifact = encode(b"", "image/png", "x.png", 0)
    assert artifact.text == "data:image/png;base64,"
    assert artifact.payload == ""


@pytest.mark.parametrize("length", [1, 2, 3, 4, 5, 100])
def test_payload_length(length):
    """测试负载长度为ceil(n/3)*4。"""
    artifact = encode(bytes(range(length)), "image/gif", "a.gif", length)
    assert len(artifact.payload) == -(-length // 3) * 4


def test_media_type_passes_through():
    """测试MIME类型不做白名单校验。"""
    artifact = encode(b"abc", "image/x-custom", "a.bin", 3)
    assert artifact.text.startswith("data:image/x-custom;base64,")


def test_encode_accepts_bytearray_and_memoryview():
    data = b"\x00\xff\x10binary"
    expected = base64.b64encode(data).decode()
    assert encode(bytearray(data), "image/png", "a", 9).payload == expected
    assert encode(memoryview(data), "image/png", "a", 9).payload == expected


def test_encode_uses_standard_alphabet():
    """测试使用 +/ 字母表和 = 填充。"""
    artifact = encode(b"\xfb\xff\xfe", "image/png", "a", 3)
    assert artifact.payload == "+//+"
    assert encode(b"\xff", "image/png", "a", 1).payload == "/w=="


def test_encode_none_buffer():
    with pytest.raises(ValueError):
        encode(None, "image/png", "a.png", 0)


def test_size_kb():
    artifact = encode(b"x" * 2048, "image/png", "a.png", 2048)
    assert artifact.size_kb == "2.00"


def test_payload_with_comma_in_media_type():
    """测试MIME类型中含逗号时负载仍然正确。"""
    artifact = encode(b"\xff", "image/a,b", "a", 1)
    assert artifact.text == "data:image/a,b;base64,/w=="
    assert artifact.payload == "/w=="
