from dataclasses import dataclass

DEFAULT_MEDIA_TYPE = "image/png"

KNOWN_MEDIA_TYPES = (
    "image/png",
    "image/jpeg",
    "image/gif",
    "image/svg+xml",
    "image/webp",
)

SCHEME_PREFIX = "data:"
BASE64_MARKER = ";base64,"


def build_data_url(media_type: str, payload: str) -> str:
    """拼接 data:<media_type>;base64,<payload> 描述串。"""
    return f"{SCHEME_PREFIX}{media_type}{BASE64_MARKER}{payload}"


@dataclass(frozen=True)
class EncodedArtifact:
    """一次编码的结果，创建后只读。"""

    text: str
    media_type: str
    source_byte_length: int
    source_name: str

    @property
    def payload(self) -> str:
        return self.text[len(build_data_url(self.media_type, "")):]

    @property
    def size_kb(self) -> str:
        return f"{self.source_byte_length / 1024:.2f}"


@dataclass(frozen=True)
class DecodedArtifact:
    """通过全部校验的解码结果。"""

    binary: bytes
    media_type: str
    data_url: str
