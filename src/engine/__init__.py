"""
Push Chess のゲームエンジン - パッケージ初期化
"""

from .errors import ErrorKind, PushChessError
from .piece import Piece, Color, PieceType, PIECE_LETTERS
from .board import Board, BOARD_SIZE, parse_square, square_name
from .move import Move, MoveType
from .rules import Rules
from .resolver import Resolver
from .notation import PLACEHOLDER_SUFFIX
from .push_chess import parse_board, serialize_board, apply_move, moveable_pieces, checkers

__all__ = [
    'ErrorKind',
    'PushChessError',
    'Piece',
    'Color',
    'PieceType',
    'PIECE_LETTERS',
    'Board',
    'BOARD_SIZE',
    'parse_square',
    'square_name',
    'Move',
    'MoveType',
    'Rules',
    'Resolver',
    'PLACEHOLDER_SUFFIX',
    'parse_board',
    'serialize_board',
    'apply_move',
    'moveable_pieces',
    'checkers',
]
