#!/usr/bin/env python3
"""
图片与Base64互转演示脚本
将图片编码为data URL，再解码回来并保存
"""

import argparse
import asyncio
import sys
import time
from pathlib import Path

from image_base64_server.codec import DecodeError, decode, encode
from image_base64_server.export import export_decoded_image, export_encoded_text
from image_base64_server.loaders import PillowImageLoader
from image_base64_server.utils import read_image_file


async def run(image_path: str, output_dir: Path) -> bool:
    """主流程"""
    try:
        source = read_image_file(image_path)
    except (FileNotFoundError, ValueError) as e:
        print(f"错误: {e}")
        return False

    print(f"文件名: {source.name}")
    print(f"文件类型: {source.media_type}")

    start_time = time.time()
    artifact = encode(source.data, source.media_type, source.name, source.size)
    print(f"编码完成，用时 {time.time() - start_time:.4f} 秒")
    print(f"文件大小: {artifact.size_kb} KB, Base64长度: {len(artifact.text)}")
    print(f"Base64文本已保存到: {export_encoded_text(artifact, output_dir)}")

    try:
        decoded = await decode(artifact.text, PillowImageLoader())
    except DecodeError as e:
        print(f"解码失败 ({e.kind}): {e.message}")
        return False

    if decoded.binary != source.data:
        print("错误: 解码结果与原始字节不一致")
        return False

    print(f"解码后的图片已保存到: {export_decoded_image(decoded, output_dir)}")
    return True


def main():
    parser = argparse.ArgumentParser(description="图片与Base64互转演示")
    parser.add_argument("image", help="图片文件路径")
    parser.add_argument("--output-dir", default=".", help="输出目录")
    args = parser.parse_args()

    success = asyncio.run(run(args.image, Path(args.output_dir)))
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
