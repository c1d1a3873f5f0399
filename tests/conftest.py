"""
pytest共通設定とフィクスチャ
"""

import pytest
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def empty_board():
    """空の盤面を提供するフィクスチャ"""
    from src.engine import Board
    return Board()


@pytest.fixture
def initial_board():
    """デモ用初期配置の盤面を提供するフィクスチャ"""
    from src.engine.initial_setup import load_initial_board
    return load_initial_board()


@pytest.fixture
def check_board():
    """白のキングが4方向から王手されている盤面"""
    from src.engine import parse_board
    return parse_board("2r2qKq/2q1N1qq/4rQ2/2R1r3/2brrnb1/8/6r1/7B w H - 0 1")


@pytest.fixture
def place():
    """空の盤面に駒を並べるヘルパー: place({'a8': 'K', 'b8': 'k'})"""
    from src.engine import Board, Piece, parse_square

    def _place(pieces: dict) -> Board:
        return Board().with_pieces({
            parse_square(square): Piece.from_letter(letter)
            for square, letter in pieces.items()
        })

    return _place
