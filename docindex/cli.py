"""
docs 디렉토리 인덱스 생성 실행 스크립트
"""

import sys
import argparse
import logging
from typing import List, Optional

from .core.config import Config, validate_config
from .core.indexer import build_index, DocsDirectoryNotFoundError

logger = logging.getLogger(__name__)


def setup_logging(level: int) -> None:
    """로깅 설정"""
    logging.basicConfig(
        level=level, format="%(asctime)s - %(levelname)s - %(message)s"
    )


def create_parser():
    """명령행 인수 파서 생성"""
    parser = argparse.ArgumentParser(
        prog="docindex",
        description="docs 디렉토리의 PDF 문서 목록으로 index.html을 생성합니다.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예제:
  # 현재 디렉토리의 docs/index.html 생성
  docindex

  # 디버그 로그 출력
  docindex --verbose
        """,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="디버그 로그 출력"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수"""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = Config()
    setup_logging(logging.DEBUG if args.verbose else config.logging_level)
    if not config.log_level_known:
        logger.warning(f"알 수 없는 LOG_LEVEL입니다. INFO를 사용합니다: {config.log_level}")

    # 종료 오류는 로그 레벨과 관계없이 stderr로 출력
    try:
        validate_config(config)
        count = build_index(config)
    except DocsDirectoryNotFoundError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("인덱스 생성 실패", exc_info=True)
        print(f"❌ Failed: {e}", file=sys.stderr)
        return 1

    print(f"✅ {config.output_path.name} 파일이 작성되었습니다 (문서 {count}개).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
