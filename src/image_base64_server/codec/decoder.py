import base64
import binascii
import logging
import re
from typing import Optional, Tuple

from ..loaders.base import ImageLoader
from .errors import EmptyInputError, InvalidEncodingError, UnloadableImageError
from .models import DEFAULT_MEDIA_TYPE, DecodedArtifact, build_data_url

logger = logging.getLogger(__name__)

# data:image/<subtype>;base64,
MARKER_PATTERN = re.compile(r"^data:(image/[A-Za-z0-9.+-]+);base64,")
PAYLOAD_PATTERN = re.compile(r"[A-Za-z0-9+/]*={0,2}")


def parse_descriptor(raw: Optional[str]) -> Tuple[str, str]:
    """拆分用户输入，得到候选MIME类型和Base64负载。

    没有前缀时默认按PNG处理；负载开头多余的一个前缀会被去掉。

    异常:
        EmptyInputError: 如果输入为空或只有空白
    """
    if raw is None or not raw.strip():
        raise EmptyInputError()

    text = raw.strip()

    match = MARKER_PATTERN.match(text)
    if match:
        media_type = match.group(1)
        payload = text[match.end():]
    else:
        media_type = DEFAULT_MEDIA_TYPE
        payload = text

    redundant = MARKER_PATTERN.match(payload)
    if redundant:
        logger.debug(f"去掉多余的前缀: {redundant.group(0)}")
        payload = payload[redundant.end():]

    return media_type, payload


def _decode_payload(payload: str) -> bytes:
    if not PAYLOAD_PATTERN.fullmatch(payload) or len(payload) % 4 != 0:
        raise InvalidEncodingError()
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError() from e


async def decode(raw: Optional[str], loader: ImageLoader) -> DecodedArtifact:
    """将用户粘贴的文本解码为经过校验的图像字节。

    参数:
        raw: 用户输入，可以带或不带 data:image/...;base64, 前缀
        loader: 图像可加载性检查器

    返回:
        DecodedArtifact: 解码后的字节和候选MIME类型

    异常:
        EmptyInputError: 输入为空
        InvalidEncodingError: 不是合法的Base64
        UnloadableImageError: 字节无法作为图像加载
    """
    media_type, payload = parse_descriptor(raw)
    binary = _decode_payload(payload)
    data_url = build_data_url(media_type, payload)

    try:
        loadable = await loader.probe(data_url)
    except Exception as e:
        logger.warning(f"图像加载检查出错: {str(e)}")
        raise UnloadableImageError() from e

    if not loadable:
        logger.info(f"解码得到 {len(binary)} 字节，但无法作为图像加载")
        raise UnloadableImageError()

    logger.info(f"解码成功，MIME类型: {media_type}, 字节数: {len(binary)}")
    return DecodedArtifact(binary=binary, media_type=media_type, data_url=data_url)
