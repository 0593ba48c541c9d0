#!/usr/bin/env python3
"""
docs/index.html 생성 실행 스크립트
"""

import sys

from docindex.cli import main

if __name__ == "__main__":
    sys.exit(main())
