import json
import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from .codec import DecodeError
from .export import export_decoded_image, export_encoded_text
from .session import ConversionSession
from .utils.image import read_image_file

# 加载环境变量
load_dotenv()

# 配置编码，默认为UTF-8
DEFAULT_ENCODING = "utf-8"


def get_output_encoding() -> str:
    return os.getenv("MCP_OUTPUT_ENCODING") or DEFAULT_ENCODING


def get_log_file_path() -> str:
    """日志文件路径，默认为模块目录下的mcp_server.log。"""
    return os.getenv("LOG_FILE") or os.path.join(
        os.path.dirname(__file__), "mcp_server.log"
    )


ENCODING = get_output_encoding()

# 配置日志记录到文件，stdout留给stdio传输
log_file_path = get_log_file_path()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    filename=log_file_path,
    filemode="a",  # 追加到日志文件
)
logger = logging.getLogger(__name__)

logger.info(f"使用编码: {ENCODING}")


def sanitize_output(text: str) -> str:
    """清理输出字符串，替换有问题的字符。"""
    if text is None:
        return ""
    try:
        return text.encode(ENCODING, "replace").decode(ENCODING)
    except Exception as e:
        logger.error(f"清理过程中出错: {str(e)}", exc_info=True)
        return text


def to_json(payload: Dict[str, Any]) -> str:
    return sanitize_output(json.dumps(payload, ensure_ascii=False))


def error_json(e: DecodeError) -> str:
    return to_json({"error": e.message, "kind": e.kind})


def get_export_dir(output_dir: Optional[str] = None) -> str:
    """获取导出目录，未指定时使用EXPORT_DIR环境变量或当前目录。"""
    return output_dir or os.getenv("EXPORT_DIR") or os.getcwd()


# 创建MCP服务器
mcp = FastMCP("mcp-image-base64")

# 整个服务器进程共享一个会话
session = ConversionSession()


@mcp.tool()
async def encode_image_from_file(filepath: str) -> str:
    """将图像文件转换为Base64编码的data URL。

    参数:
        filepath: 图像文件的路径

    返回:
        str: JSON格式的转换结果，包含data_url、文件名、大小和类型
    """
    try:
        logger.info(f"处理图像编码请求: {filepath}")
        session.load_source(read_image_file(filepath))
        artifact = session.encode()

        return to_json({
            "data_url": artifact.text,
            "file_name": artifact.source_name,
            "file_size": artifact.source_byte_length,
            "size_kb": artifact.size_kb,
            "file_type": artifact.media_type,
            "length": len(artifact.text),
        })
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"输入错误: {str(e)}")
        return to_json({"error": str(e)})
    except Exception as e:
        logger.error(f"编码图像时出错: {str(e)}", exc_info=True)
        return to_json({"error": f"编码图像时出错: {str(e)}"})


@mcp.tool()
async def decode_base64_image(text: str) -> str:
    """将Base64编码（可带data:image/...;base64,前缀）转换为图像并校验。

    参数:
        text: 粘贴的Base64编码

    返回:
        str: JSON格式的解码结果，失败时包含error和kind
    """
    try:
        logger.info(f"处理图像解码请求，输入长度: {len(text or '')}")
        artifact = await session.decode(text)

        return to_json({
            "media_type": artifact.media_type,
            "byte_length": len(artifact.binary),
            "data_url": artifact.data_url,
        })
    except DecodeError as e:
        logger.warning(f"解码失败: {e.kind}")
        return error_json(e)
    except Exception as e:
        logger.error(f"解码图像时出错: {str(e)}", exc_info=True)
        return to_json({"error": f"解码图像时出错: {str(e)}"})


@mcp.tool()
async def save_base64_text(filepath: str, output_dir: Optional[str] = None) -> str:
    """将图像文件编码后保存为 <文件名>_base64.txt。

    参数:
        filepath: 图像文件的路径
        output_dir: 保存目录，默认为EXPORT_DIR或当前目录

    返回:
        str: JSON格式的结果，包含保存路径
    """
    try:
        session.load_source(read_image_file(filepath))
        artifact = session.encode()
        path = export_encoded_text(artifact, get_export_dir(output_dir))
        return to_json({"path": str(path), "length": len(artifact.text)})
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"输入错误: {str(e)}")
        return to_json({"error": str(e)})
    except OSError as e:
        logger.error(f"保存Base64文本失败: {str(e)}", exc_info=True)
        return to_json({"error": f"保存Base64文本失败: {str(e)}"})
    except Exception as e:
        logger.error(f"保存Base64文本时出错: {str(e)}", exc_info=True)
        return to_json({"error": f"保存Base64文本时出错: {str(e)}"})


@mcp.tool()
async def save_decoded_image(text: str, output_dir: Optional[str] = None) -> str:
    """将Base64编码解码后保存为图像文件。

    参数:
        text: 粘贴的Base64编码
        output_dir: 保存目录，默认为EXPORT_DIR或当前目录

    返回:
        str: JSON格式的结果，包含保存路径，失败时包含error和kind
    """
    try:
        artifact = await session.decode(text)
        path = export_decoded_image(artifact, get_export_dir(output_dir))
        return to_json({
            "path": str(path),
            "media_type": artifact.media_type,
            "byte_length": len(artifact.binary),
        })
    except DecodeError as e:
        logger.warning(f"解码失败: {e.kind}")
        return error_json(e)
    except OSError as e:
        logger.error(f"保存图像失败: {str(e)}", exc_info=True)
        return to_json({"error": f"保存图像失败: {str(e)}"})
    except Exception as e:
        logger.error(f"保存图像时出错: {str(e)}", exc_info=True)
        return to_json({"error": f"保存图像时出错: {str(e)}"})


if __name__ == "__main__":
    mcp.run()
