import base64
import logging
from typing import Union

from .models import EncodedArtifact, build_data_url

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def encode(
    buffer: BytesLike, media_type: str, file_name: str, file_size: int
) -> EncodedArtifact:
    """将图像字节编码为 data URL 文本。

    参数:
        buffer: 图像的原始字节，可以为空
        media_type: 来源报告的MIME类型，原样透传，不做白名单校验
        file_name: 来源文件名
        file_size: 来源报告的文件大小（字节）

    返回:
        EncodedArtifact: 包含 data:<media_type>;base64,<payload> 文本的结果

    异常:
        ValueError: 如果buffer为None
    """
    if buffer is None:
        raise ValueError("图像数据不能为None")

    payload = base64.b64encode(bytes(buffer)).decode("ascii")
    logger.debug(f"编码完成: {file_name}, 字节数: {len(buffer)}, Base64长度: {len(payload)}")

    return EncodedArtifact(
        text=build_data_url(media_type, payload),
        media_type=media_type,
        source_byte_length=file_size,
        source_name=file_name,
    )
