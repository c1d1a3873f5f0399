"""
初期盤面の設定
"""

from .board import Board
from .notation import parse_board

# デモ用の初期配置（白のキングの周りに黒の駒が集まっている）
STARTING_FEN = "2r2qKq/2q1N1qq/4qQ2/2R1r3/2brrnb1/8/6r1/7B w HAha - 0 1"


def load_initial_board() -> Board:
    """デモ用の初期盤面を読み込む"""
    return parse_board(STARTING_FEN)
