class DecodeError(Exception):
    """解码失败的基类，message可直接展示给用户。"""

    kind = "DecodeError"
    default_message = "解码失败"

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyInputError(DecodeError):
    """未提供任何文本。"""

    kind = "EmptyInput"
    default_message = "请输入Base64编码"


class InvalidEncodingError(DecodeError):
    """去掉前缀后不是合法的Base64文本。"""

    kind = "InvalidEncoding"
    default_message = "无效的Base64编码"


class UnloadableImageError(DecodeError):
    """Base64合法，但解码结果无法作为图像加载。"""

    kind = "UnloadableImage"
    default_message = "无效的Base64图片编码"
