from typing import Protocol


class ImageLoader(Protocol):
    """图像可加载性检查器。"""

    async def probe(self, data_url: str) -> bool:
        """检查 data URL 是否能作为图像加载。"""
        ...
