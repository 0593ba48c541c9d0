#!/usr/bin/env python3
"""
docindex 패키지 기본 사용 예제

이 예제는 docindex를 Python 라이브러리로 사용하는 방법을 보여줍니다.
"""

from pathlib import Path

from docindex import (
    Config,
    validate_config,
    walk_documents,
    natural_sort,
    render_index,
    build_index,
)


def main():
    """기본 사용 예제"""
    print("📚 docindex 패키지 기본 사용 예제")
    print("=" * 50)

    # 1. 설정 로드
    config = Config.for_directory(Path.cwd(), title="My Booklets")
    try:
        validate_config(config)
    except ValueError as e:
        print(f"❌ 설정 오류: {e}")
        return

    if not config.root_dir.exists():
        print(f"❌ docs 디렉토리가 없습니다: {config.root_dir}")
        return

    # 2. 탐색과 정렬만 수행
    paths = natural_sort(walk_documents(config.root_dir))
    print(f"🔍 찾은 문서 ({len(paths)}개):")
    for path in paths:
        print(f"   - {Path(path).name}")

    # 3. 파일로 쓰지 않고 HTML 미리보기
    document = render_index(paths, config)
    print(f"\n📄 생성될 HTML 길이: {len(document)}자")

    # 4. 전체 흐름 실행
    count = build_index(config)
    print(f"✅ {config.output_path} 작성 완료 (문서 {count}개)")


if __name__ == "__main__":
    main()
