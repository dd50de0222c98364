import base64
import io

import pytest
from PIL import Image


class StaticLoader:
    """始终返回固定结果的图像加载检查器，并记录收到的data URL。"""

    def __init__(self, result: bool = True):
        self.result = result
        self.calls = []

    async def probe(self, data_url: str) -> bool:
        self.calls.append(data_url)
        return self.result


def make_image_bytes(fmt: str = "PNG", size=(4, 4), color="red") -> bytes:
    img = Image.new("RGB", size, color=color)
    buffer = io.BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    """一个4x4的PNG图像。"""
    return make_image_bytes("PNG")


@pytest.fixture
def png_base64(png_bytes) -> str:
    return base64.b64encode(png_bytes).decode()


@pytest.fixture
def svg_bytes() -> bytes:
    return (
        b'<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">'
        b'<rect width="10" height="10" fill="blue"/></svg>'
    )


@pytest.fixture
def accepting_loader() -> StaticLoader:
    return StaticLoader(True)


@pytest.fixture
def rejecting_loader() -> StaticLoader:
    return StaticLoader(False)


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image_bytes("JPEG")


@pytest.fixture
def image_factory():
    """按格式生成图像字节。"""
    return make_image_bytes
