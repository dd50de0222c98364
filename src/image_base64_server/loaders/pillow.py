import asyncio
import base64
import binascii
import io
import logging
import xml.etree.ElementTree as ET

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

# 浏览器能直接显示的位图格式
BROWSER_FORMATS = ("PNG", "JPEG", "GIF", "WEBP", "BMP", "ICO")


def _is_svg(data: bytes) -> bool:
    try:
        root = ET.fromstring(data)
    except ET.ParseError:
        return False
    return root.tag.rsplit("}", 1)[-1] == "svg"


class PillowImageLoader:
    """使用Pillow检查图像字节能否加载，Pillow无法识别时再检查是否为SVG。

    只接受formats中列出的格式，TGA、PCX等浏览器无法显示的格式视为无法加载。
    """

    def __init__(self, formats=BROWSER_FORMATS):
        self.formats = list(formats)

    def verify_bytes(self, data: bytes) -> bool:
        """同步检查字节是否为可加载的图像。

        参数:
            data: 图像字节

        返回:
            如果可加载返回True，否则返回False
        """
        if not data:
            logger.warning("图像数据为空")
            return False

        try:
            with Image.open(io.BytesIO(data), formats=self.formats) as img:
                logger.debug(f"验证图像, 格式: {img.format}, 大小: {img.size}")
                img.verify()
                return True
        except UnidentifiedImageError:
            if _is_svg(data):
                logger.debug("验证图像, 格式: SVG")
                return True
            logger.warning("无法识别的图像格式")
            return False
        except Exception as e:
            logger.warning(f"无效的图像数据: {str(e)}")
            return False

    async def probe(self, data_url: str) -> bool:
        """检查 data:<type>;base64,<payload> 是否能作为图像加载。"""
        _, sep, payload = data_url.partition(",")
        if not sep:
            logger.warning("缺少data URL负载分隔符")
            return False

        try:
            data = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.warning(f"无效的base64数据: {str(e)}")
            return False

        return await asyncio.to_thread(self.verify_bytes, data)
