import logging
from typing import Optional

from .codec import (DecodedArtifact, DecodeError, EncodedArtifact, decode,
                    encode)
from .loaders import ImageLoader, PillowImageLoader
from .utils.image import ImageSource

logger = logging.getLogger(__name__)


class ConversionSession:
    """一次交互会话的状态。

    同一时间最多保留一个编码结果，加载新的图像源会丢弃旧结果。
    解码按调用顺序编号，只有最新一次调用的结果会记录到会话中，
    较早的调用仍然会把自己的结果返回给调用方。
    """

    def __init__(self, loader: Optional[ImageLoader] = None):
        self.loader = loader or PillowImageLoader()
        self.source: Optional[ImageSource] = None
        self.encoded: Optional[EncodedArtifact] = None
        self.decoded: Optional[DecodedArtifact] = None
        self.decode_error: Optional[DecodeError] = None
        self._decode_generation = 0

    def load_source(self, source: ImageSource) -> None:
        self.source = source
        self.encoded = None
        logger.debug(f"加载图像源: {source.name}")

    def encode(self) -> EncodedArtifact:
        """编码当前图像源。

        异常:
            ValueError: 如果尚未加载图像源
        """
        if self.source is None:
            raise ValueError("尚未加载图像源")

        source = self.source
        self.encoded = encode(source.data, source.media_type, source.name, source.size)
        return self.encoded

    async def decode(self, raw: str) -> DecodedArtifact:
        self._decode_generation += 1
        generation = self._decode_generation

        try:
            artifact = await decode(raw, self.loader)
        except DecodeError as e:
            if generation == self._decode_generation:
                self.decoded = None
                self.decode_error = e
            raise

        if generation == self._decode_generation:
            self.decoded = artifact
            self.decode_error = None
        else:
            logger.debug(f"第{generation}次解码已被更新的请求取代")
        return artifact
