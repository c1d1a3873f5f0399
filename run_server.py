#!/usr/bin/env python
"""
Push Chess 開発サーバ起動スクリプト

環境変数で設定を上書きできる:
    PUSH_CHESS_HOST       (既定: 0.0.0.0)
    PUSH_CHESS_PORT       (既定: 8001)
    PUSH_CHESS_LOG_LEVEL  (既定: info)
"""

import os
import sys

# プロジェクトルートをパスに追加
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from src.api.main import app
import uvicorn

HOST = os.environ.get("PUSH_CHESS_HOST", "0.0.0.0")
PORT = int(os.environ.get("PUSH_CHESS_PORT", "8001"))
LOG_LEVEL = os.environ.get("PUSH_CHESS_LOG_LEVEL", "info")

if __name__ == "__main__":
    print("=" * 60)
    print("Push Chess 開発サーバを起動します")
    print("=" * 60)
    print(f"APIサーバ: http://localhost:{PORT}")
    print(f"API ドキュメント: http://localhost:{PORT}/docs")
    print("=" * 60)
    print()

    uvicorn.run(
        app,
        host=HOST,
        port=PORT,
        reload=False,
        log_level=LOG_LEVEL
    )
