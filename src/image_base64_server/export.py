import logging
import time
from pathlib import Path
from typing import Optional, Union

from .codec.models import DecodedArtifact, EncodedArtifact

logger = logging.getLogger(__name__)

MIME_TO_EXTENSION = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/gif": "gif",
    "image/svg+xml": "svg",
    "image/webp": "webp",
    "image/bmp": "bmp",
    "image/x-icon": "ico",
}


def encoded_text_filename(source_name: str) -> str:
    """Base64文本的下载文件名，取原文件名第一个点之前的部分。"""
    return f"{source_name.split('.')[0]}_base64.txt"


def decoded_image_filename(media_type: str, timestamp_ms: Optional[int] = None) -> str:
    """解码图像的下载文件名，形如 decoded_image_<毫秒时间戳>.<扩展名>。"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    extension = MIME_TO_EXTENSION.get(media_type, "png")
    return f"decoded_image_{timestamp_ms}.{extension}"


def export_encoded_text(artifact: EncodedArtifact, output_dir: Union[str, Path]) -> Path:
    """将编码结果写入文本文件并返回文件路径。"""
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / encoded_text_filename(artifact.source_name)
    path.write_text(artifact.text, encoding="utf-8")
    logger.info(f"已导出Base64文本: {path}")
    return path


def export_decoded_image(artifact: DecodedArtifact, output_dir: Union[str, Path]) -> Path:
    """将解码后的图像字节写入文件并返回文件路径。"""
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / decoded_image_filename(artifact.media_type)
    path.write_bytes(artifact.binary)
    logger.info(f"已导出图像: {path}, 字节数: {len(artifact.binary)}")
    return path
