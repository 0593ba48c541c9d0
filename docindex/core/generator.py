"""
HTML 인덱스 생성 모듈
정렬된 파일 경로 목록으로 정적 HTML 페이지를 만들고 디스크에 기록합니다.
"""

import os
import html
import logging
from pathlib import Path
from typing import Iterable

from .config import Config
from ..utils.paths import relative_posix, encode_uri

# 로깅 설정
logger = logging.getLogger(__name__)

INTRO_TEXT = "Index of audio chess CASSette booklets:"

PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{title}</title>
  <style>
    body {{ font-family: system-ui, -apple-system, "Segoe UI", Roboto, "Helvetica Neue", Arial; padding: 2rem; }}
    h1 {{ font-size: 1.5rem; }}
    ul {{ line-height: 1.6; }}
  </style>
</head>
<body>
  <h1>{title}</h1>
  <p>{intro}</p>
  <ul>
{items}
  </ul>
</body>
</html>"""


def render_list_item(path: str, root_dir: str) -> str:
    """
    파일 하나의 목록 항목을 만듭니다.

    Args:
        path: 파일의 절대 경로
        root_dir: 링크 기준이 되는 docs 디렉토리의 절대 경로

    Returns:
        <li> 요소 문자열
    """
    label = relative_posix(path, root_dir)
    href = encode_uri(label)
    return f' <li><a href="{href}">{html.escape(label, quote=False)}</a></li>'


def render_index(paths: Iterable[str], config: Config) -> str:
    """
    인덱스 HTML 문서를 생성합니다.

    Args:
        paths: 이미 정렬된 파일 절대 경로들
        config: 제목과 docs 디렉토리를 담은 설정

    Returns:
        완성된 HTML 문서
    """
    root_dir = os.path.abspath(config.root_dir)
    items = "\n".join(render_list_item(path, root_dir) for path in paths)
    title = html.escape(config.title, quote=False)
    return PAGE_TEMPLATE.format(title=title, intro=INTRO_TEXT, items=items)


def write_index(paths: Iterable[str], config: Config) -> Path:
    """
    인덱스 HTML을 생성하여 출력 파일에 덮어씁니다.

    Args:
        paths: 이미 정렬된 파일 절대 경로들
        config: 출력 경로를 담은 설정

    Returns:
        기록된 파일 경로
    """
    document = render_index(paths, config)
    output_path = Path(config.output_path)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(document)
    logger.info(f"인덱스 파일을 기록했습니다: {output_path}")
    return output_path
