"""
Push Chess エンジンの公開操作

UI などの外部からはこのモジュールの関数だけを呼ぶ
マス目は代数表記（'a8' など）でやり取りする
"""

from typing import List

from .board import Board, square_name
from .move import Move
from .notation import parse_board, serialize_board
from .resolver import Resolver
from .rules import Rules

__all__ = [
    'parse_board',
    'serialize_board',
    'apply_move',
    'moveable_pieces',
    'checkers',
]


def apply_move(board: Board, from_square: str, to_square: str) -> Board:
    """手を適用した新しい盤面を返す（失敗時は PushChessError）"""
    return Resolver.apply_move(board, Move.from_squares(from_square, to_square))


def moveable_pieces(board: Board) -> List[str]:
    """まだ動いていない白の駒のマス目"""
    return [square_name(position) for position in Rules.get_moveable_positions(board)]


def checkers(board: Board) -> List[str]:
    """白のキングに王手をかけている黒の駒のマス目"""
    return [square_name(position) for position in Rules.get_checker_positions(board)]
