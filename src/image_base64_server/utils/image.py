import io
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

FORMAT_TO_MIME = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "GIF": "image/gif",
    "WEBP": "image/webp",
    "BMP": "image/bmp",
    "ICO": "image/x-icon",
    "TIFF": "image/tiff",
}

FALLBACK_MIME = "application/octet-stream"


@dataclass(frozen=True)
class ImageSource:
    """上传的图像文件：字节、MIME类型、文件名和大小。"""

    data: bytes
    media_type: str
    name: str
    size: int


def detect_media_type(data: bytes, file_name: str = "") -> str:
    """根据内容检测MIME类型，Pillow无法识别时按文件扩展名猜测。"""
    try:
        with Image.open(io.BytesIO(data)) as img:
            if img.format in FORMAT_TO_MIME:
                return FORMAT_TO_MIME[img.format]
    except (UnidentifiedImageError, OSError):
        logger.debug(f"Pillow无法识别图像内容: {file_name}")

    guessed, _ = mimetypes.guess_type(file_name)
    return guessed or FALLBACK_MIME


def read_image_file(image_path: str) -> ImageSource:
    """读取图像文件并检测其MIME类型。

    参数:
        image_path: 图像文件的路径

    返回:
        ImageSource: 文件字节、MIME类型、文件名和大小

    异常:
        FileNotFoundError: 如果图像文件不存在
        ValueError: 如果文件无法读取或不是图像
    """
    path = Path(image_path)
    if not path.is_file():
        logger.error(f"找不到图像文件: {image_path}")
        raise FileNotFoundError(f"找不到图像文件: {image_path}")

    try:
        data = path.read_bytes()
    except OSError as e:
        logger.error(f"读取图像文件失败: {str(e)}")
        raise ValueError(f"读取图像文件失败: {str(e)}")

    media_type = detect_media_type(data, path.name)
    if not media_type.startswith("image/"):
        logger.error(f"无效的图像格式: {image_path}, 类型: {media_type}")
        raise ValueError(f"无效的图像格式: {media_type}")

    logger.info(f"正在处理图像: {image_path}, 类型: {media_type}, 大小: {len(data)}")

    return ImageSource(data=data, media_type=media_type, name=path.name, size=len(data))
