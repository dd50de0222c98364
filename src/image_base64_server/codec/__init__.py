"""Image and Base64 data URL conversion."""

from .decoder import decode, parse_descriptor
from .encoder import encode
from .errors import (DecodeError, EmptyInputError, InvalidEncodingError,
                     UnloadableImageError)
from .models import (DEFAULT_MEDIA_TYPE, KNOWN_MEDIA_TYPES, DecodedArtifact,
                     EncodedArtifact, build_data_url)

__all__ = [
    "decode",
    "parse_descriptor",
    "encode",
    "DecodeError",
    "EmptyInputError",
    "InvalidEncodingError",
    "UnloadableImageError",
    "DEFAULT_MEDIA_TYPE",
    "KNOWN_MEDIA_TYPES",
    "DecodedArtifact",
    "EncodedArtifact",
    "build_data_url",
]
