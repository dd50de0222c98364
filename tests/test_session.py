import asyncio

import pytest

from image_base64_server.codec import InvalidEncodingError
from image_base64_server.session import ConversionSession
from image_base64_server.utils.image import ImageSource


@pytest.fixture
def source(png_bytes):
    return ImageSource(data=png_bytes, media_type="image/png", name="a.png", size=len(png_bytes))


def test_encode_requires_source(accepting_loader):
    session = ConversionSession(accepting_loader)
    with pytest.raises(ValueError):
        session.encode()


def test_new_source_discards_artifact(source, accepting_loader):
    """测试加载新的图像源会丢弃旧的编码结果。"""
    session = ConversionSession(accepting_loader)
    session.load_source(source)
    artifact = session.encode()
    assert session.encoded is artifact

    session.load_source(ImageSource(data=b"", media_type="image/gif", name="b.gif", size=0))
    assert session.encoded is None
    assert session.encode().text == "data:image/gif;base64,"


@pytest.mark.asyncio
async def test_decode_records_result(png_base64, accepting_loader):
    session = ConversionSession(accepting_loader)
    artifact = await session.decode(png_base64)
    assert session.decoded is artifact
    assert session.decode_error is None


@pytest.mark.asyncio
async def test_decode_records_error(png_base64, accepting_loader):
    session = ConversionSession(accepting_loader)
    await session.decode(png_base64)

    with pytest.raises(InvalidEncodingError):
        await session.decode("!!!")
    assert session.decoded is None
    assert session.decode_error.kind == "InvalidEncoding"


class GatedLoader:
    """按data URL前缀分别控制检查何时完成。"""

    def __init__(self):
        self.gates = {}

    def gate(self, prefix: str) -> asyncio.Event:
        return self.gates.setdefault(prefix, asyncio.Event())

    async def probe(self, data_url: str) -> bool:
        prefix = data_url.split(";", 1)[0]
        await self.gate(prefix).wait()
        return True


@pytest.mark.asyncio
async def test_last_decode_wins(png_base64):
    """测试较早的解码晚完成时，不会覆盖最新一次的结果。"""
    loader = GatedLoader()
    session = ConversionSession(loader)

    first = asyncio.create_task(session.decode(f"data:image/gif;base64,{png_base64}"))
    await asyncio.sleep(0)
    second = asyncio.create_task(session.decode(png_base64))
    await asyncio.sleep(0)

    loader.gate("data:image/png").set()
    latest = await second
    loader.gate("data:image/gif").set()
    earlier = await first

    assert earlier.media_type == "image/gif"
    assert latest.media_type == "image/png"
    assert session.decoded is latest
